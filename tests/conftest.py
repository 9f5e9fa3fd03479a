"""Shared pytest fixtures for all tests."""

import pytest

from langdet.detector import Detector
from langdet.models import Language

ENGLISH_TEXT = """
The quick brown fox jumps over the lazy dog while the children are playing in
the garden. It was a bright cold day in April, and the clocks were striking
thirteen. We have to think about what we want to do with the rest of the
afternoon before the weather changes. There is nothing more beautiful than the
light of the evening falling through the windows of an old house, and the
people who live there say that they would never want to leave it.
"""

FRENCH_TEXT = """
Le renard brun rapide saute par-dessus le chien paresseux pendant que les
enfants jouent dans le jardin. C'était une journée d'avril froide et claire,
et les horloges sonnaient treize heures. Nous devons réfléchir à ce que nous
voulons faire du reste de l'après-midi avant que le temps ne change. Il n'y a
rien de plus beau que la lumière du soir qui tombe par les fenêtres d'une
vieille maison, et les gens qui y vivent disent qu'ils ne voudraient jamais la
quitter.
"""

GERMAN_TEXT = """
Der schnelle braune Fuchs springt über den faulen Hund, während die Kinder im
Garten spielen. Es war ein heller, kalter Tag im April, und die Uhren schlugen
dreizehn. Wir müssen darüber nachdenken, was wir mit dem Rest des Nachmittags
machen wollen, bevor sich das Wetter ändert. Es gibt nichts Schöneres als das
Licht des Abends, das durch die Fenster eines alten Hauses fällt, und die
Leute, die dort wohnen, sagen, dass sie es niemals verlassen wollen.
"""


@pytest.fixture
def english_text():
    return ENGLISH_TEXT


@pytest.fixture
def french_text():
    return FRENCH_TEXT


@pytest.fixture
def german_text():
    return GERMAN_TEXT


@pytest.fixture
def languages():
    """English, French and German profiles trained at the detection depth."""
    return [
        Language.from_text(ENGLISH_TEXT, "en"),
        Language.from_text(FRENCH_TEXT, "fr"),
        Language.from_text(GERMAN_TEXT, "de"),
    ]


@pytest.fixture
def detector(languages):
    """Detector holding the sample languages, without result caching."""
    return Detector(languages=languages, enable_cache=False)


@pytest.fixture
def abstracts_xml():
    """A small Wikipedia abstracts dump."""
    return b"""<?xml version="1.0" encoding="utf-8"?>
<feed>
<doc>
<title>Wikipedia: Cat</title>
<url>https://en.wikipedia.org/wiki/Cat</url>
<abstract>The cat is a small domesticated carnivorous mammal.</abstract>
</doc>
<doc>
<title>Wikipedia: Dog</title>
<url>https://en.wikipedia.org/wiki/Dog</url>
<abstract>The dog is a domesticated descendant of the wolf.</abstract>
</doc>
<doc>
<title>Wikipedia: Empty</title>
<url>https://en.wikipedia.org/wiki/Empty</url>
<abstract />
</doc>
</feed>
"""


@pytest.fixture
def abstracts_file(tmp_path, abstracts_xml):
    path = tmp_path / "abstracts.xml"
    path.write_bytes(abstracts_xml)
    return path
