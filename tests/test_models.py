"""
Tests for models.py - pydantic settings and results.
"""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from govde.models import FilterSettings, StemResult
from govde.settings import PROTECTED_WORDS, WORD_LIST_ENV_VARS, WORD_LIST_KINDS


@pytest.fixture
def clean_env(monkeypatch):
    for name in WORD_LIST_ENV_VARS.values():
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestFilterSettings:
    """Tests for FilterSettings."""

    def test_defaults(self):
        """Test no paths are configured by default."""
        settings = FilterSettings()
        for kind in WORD_LIST_KINDS:
            assert settings.path_for(kind) is None

    def test_paths_are_coerced(self):
        """Test string paths become Path objects."""
        settings = FilterSettings(protected_words_path="words.txt")
        assert settings.protected_words_path == Path("words.txt")
        assert settings.path_for(PROTECTED_WORDS) == Path("words.txt")

    def test_unknown_field_rejected(self):
        """Test unknown settings are rejected."""
        with pytest.raises(ValidationError):
            FilterSettings(stop_words_path="words.txt")

    def test_frozen(self):
        """Test settings cannot be changed after creation."""
        settings = FilterSettings()
        with pytest.raises(ValidationError):
            settings.protected_words_path = Path("words.txt")

    def test_from_mapping(self):
        """Test settings from a plain mapping."""
        settings = FilterSettings.from_mapping({"last_consonant_exceptions_path": "consonants.txt"})
        assert settings.last_consonant_exceptions_path == Path("consonants.txt")

    def test_from_mapping_rejects_unknown(self):
        """Test unknown keys in a mapping are rejected."""
        with pytest.raises(ValidationError):
            FilterSettings.from_mapping({"language": "tr"})

    def test_from_env(self, clean_env):
        """Test paths from environment variables."""
        clean_env.setenv("GOVDE_PROTECTED_WORDS_PATH", "/etc/govde/protected.txt")
        settings = FilterSettings.from_env()
        assert settings.protected_words_path == Path("/etc/govde/protected.txt")
        assert settings.vowel_harmony_exceptions_path is None

    def test_from_env_overrides(self, clean_env):
        """Test explicit values win over the environment."""
        clean_env.setenv("GOVDE_PROTECTED_WORDS_PATH", "/etc/govde/protected.txt")
        settings = FilterSettings.from_env(protected_words_path="mine.txt",
                                           vowel_harmony_exceptions_path=None)
        assert settings.protected_words_path == Path("mine.txt")
        assert settings.vowel_harmony_exceptions_path is None

    def test_from_env_empty(self, clean_env):
        """Test empty environment gives default settings."""
        assert FilterSettings.from_env() == FilterSettings()


class TestStemResult:
    """Tests for StemResult."""

    def test_from_stemmer(self, stemmer):
        """Test result of a stemmed word."""
        result = StemResult.from_stemmer(stemmer, "kitapları")
        assert result.word == "kitapları"
        assert result.stem == "kitap"
        assert result.candidates == ["kitap", "kitaplar"]

    def test_unstemmed(self, stemmer):
        """Test result of a protected word."""
        result = StemResult.from_stemmer(stemmer, "ayfon")
        assert result.stem == "ayfon"
        assert result.candidates == ["ayfon"]

    def test_json(self, stemmer):
        """Test JSON serialization."""
        data = json.loads(StemResult.from_stemmer(stemmer, "satıyorsunuz").model_dump_json())
        assert data["word"] == "satıyorsunuz"
        assert data["stem"] == "satıyor"
        assert data["candidates"][0] == "satıyor"
