"""Tests for reading and writing language profiles."""

import io
import json

import pytest

from langdet.exceptions import ProfileLoadError
from langdet.models import Language
from langdet.storage import (
    load_language,
    load_languages,
    load_languages_from_dir,
    load_languages_from_reader,
    load_profiles,
    save_language,
    save_languages,
)


def _profiles(languages):
    return [(language.name, dict(language.profile)) for language in languages]


class TestSaveAndLoad:
    """Test profile persistence."""

    def test_languages_file_round_trip(self, tmp_path, languages):
        path = tmp_path / "languages.json"
        save_languages(languages, path)
        assert _profiles(load_languages(path)) == _profiles(languages)

    def test_single_language_round_trip(self, tmp_path, languages):
        path = tmp_path / "en.json"
        save_language(languages[0], path)

        assert json.loads(path.read_text(encoding="utf-8"))["name"] == "en"
        assert _profiles([load_language(path)]) == _profiles(languages[:1])

    def test_non_ascii_tokens_survive(self, tmp_path):
        language = Language.from_text("Straße über Ölfässer", "de")
        path = tmp_path / "de.json"
        save_language(language, path)
        assert "ü" in load_language(path).profile

    def test_load_from_text_reader(self, languages):
        payload = json.dumps([language.to_dict() for language in languages])
        loaded = load_languages_from_reader(io.StringIO(payload))
        assert [language.name for language in loaded] == ["en", "fr", "de"]

    def test_load_from_binary_reader(self, languages):
        payload = json.dumps([languages[0].to_dict()]).encode("utf-8")
        assert load_languages_from_reader(io.BytesIO(payload))[0].name == "en"


class TestLoadDirectory:
    """Test loading one language per file."""

    def test_files_loaded_in_name_order(self, tmp_path, languages):
        for language in languages:
            save_language(language, tmp_path / f"{language.name}.json")
        (tmp_path / "nested").mkdir()

        loaded = load_languages_from_dir(tmp_path)
        assert [language.name for language in loaded] == ["de", "en", "fr"]

    def test_load_profiles_dispatches(self, tmp_path, languages):
        directory = tmp_path / "profiles"
        directory.mkdir()
        save_language(languages[0], directory / "en.json")
        array_file = tmp_path / "all.json"
        save_languages(languages, array_file)

        assert len(load_profiles(directory)) == 1
        assert len(load_profiles(array_file)) == 3

    def test_missing_directory(self, tmp_path):
        with pytest.raises(ProfileLoadError, match="Could not list"):
            load_languages_from_dir(tmp_path / "missing")

    def test_bad_file_fails_whole_load(self, tmp_path, languages):
        save_language(languages[0], tmp_path / "en.json")
        (tmp_path / "zz.json").write_text("{not json", encoding="utf-8")

        with pytest.raises(ProfileLoadError, match="Could not decode"):
            load_languages_from_dir(tmp_path)


class TestLoadErrors:
    """Test malformed profile input."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(ProfileLoadError, match="Could not open") as exc_info:
            load_languages(tmp_path / "missing.json")
        assert exc_info.value.error_code == "PROFILE_LOAD_ERROR"

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(ProfileLoadError, match="Could not decode"):
            load_languages(path)

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "object.json"
        path.write_text('{"name": "en", "profile": {}}', encoding="utf-8")
        with pytest.raises(ProfileLoadError, match="Expected a list"):
            load_languages(path)

    def test_malformed_record(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text('[{"name": "en", "profile": {"a": -1}}]', encoding="utf-8")
        with pytest.raises(ProfileLoadError, match="invalid rank"):
            load_languages(path)

    def test_malformed_single_record(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(ProfileLoadError, match="must be an object"):
            load_language(path)

    def test_invalid_reader_payload(self):
        with pytest.raises(ProfileLoadError, match="Could not decode"):
            load_languages_from_reader(io.StringIO("nope"))
