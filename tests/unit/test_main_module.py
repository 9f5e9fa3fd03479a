"""Test the __main__ module."""

from unittest.mock import patch

import pytest


def test_main_module():
    """main() exits with the status returned by cli()."""
    with patch("langdet.cli.cli", return_value=0) as mock_cli:
        from langdet.__main__ import main

        with pytest.raises(SystemExit) as exc_info:
            main()

    mock_cli.assert_called_once()
    assert exc_info.value.code == 0
