"""End-to-end tests: training, persistence and detection together."""

import pytest

from langdet.config import DetectorConfig, create_detector
from langdet.corpus import iter_abstracts, train_language
from langdet.detector import Detector
from langdet.models import UNDETERMINED
from langdet.preset import LanguagePreset
from langdet.storage import load_profiles, save_language, save_languages

pytestmark = pytest.mark.integration


def test_trained_profiles_survive_persistence(tmp_path, english_text, french_text, german_text):
    profiles = tmp_path / "profiles"
    profiles.mkdir()
    trainer = Detector()
    for text, name in ((english_text, "en"), (french_text, "fr"), (german_text, "de")):
        save_language(trainer.add_language_from_text(text, name), profiles / f"{name}.json")

    detector = create_detector(DetectorConfig(profiles_path=profiles))

    assert detector.language_names() == ["de", "en", "fr"]
    for text, name in ((english_text, "en"), (french_text, "fr"), (german_text, "de")):
        assert detector.detect_best(text) == name
        assert detector.detect_all(text)[0].confidence == 100


def test_unseen_sentences(detector):
    assert detector.detect_all("the people in the house were thinking about the weather")[0].name == "en"
    assert detector.detect_all("les gens de la maison pensaient au temps qu'il fait")[0].name == "fr"
    assert detector.detect_all("die Leute im Haus dachten über das Wetter nach")[0].name == "de"


def test_detection_with_dump_trained_profile(tmp_path, abstracts_file, french_text):
    english = train_language(iter_abstracts(str(abstracts_file)), "en", depth=4)
    detector = Detector(languages=[english])
    detector.add_language_from_text(french_text, "fr")

    results = detector.detect_all("The wolf is a wild carnivorous mammal")

    assert results[0].name == "en"
    assert results[0].confidence > results[1].confidence


def test_preset_detectors_stay_independent(tmp_path, languages):
    path = tmp_path / "languages.json"
    save_languages(languages, path)
    preset = LanguagePreset.from_path(path)

    strict = preset.new_detector(minimum_confidence=1.0)
    lenient = preset.new_detector(minimum_confidence=0.01)
    lenient.add_language_from_text("ciao mondo", "it")

    sentence = "the people in the house"
    assert strict.detect_best(sentence) == UNDETERMINED
    assert lenient.detect_best(sentence) == "en"
    assert [language.name for language in load_profiles(path)] == ["en", "fr", "de"]
    assert len(strict) == 3
