"""Allow running langdet as ``python -m langdet``."""

from .cli import main

if __name__ == "__main__":
    main()
