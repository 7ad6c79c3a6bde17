"""
Pydantic models for govde settings and results.

FilterSettings validates the configuration of a token filter (the four
optional exception word list paths). StemResult is the JSON shape printed
by the command line interface.

Usage:
    from govde.models import FilterSettings, StemResult

    settings = FilterSettings.model_validate({"protected_words_path": "words.txt"})
    result = StemResult.from_stemmer(stemmer, "kitapları")
"""

from pathlib import Path
from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from govde.settings import WORD_LIST_KINDS, word_list_path_from_env


class FilterSettings(BaseModel):
    """
    Settings of a Turkish stemmer token filter.

    A missing path means the bundled default list is used.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    protected_words_path: Optional[Path] = Field(
        None, description="Words that are never stemmed")
    vowel_harmony_exceptions_path: Optional[Path] = Field(
        None, description="Words stripped even without vowel harmony")
    last_consonant_exceptions_path: Optional[Path] = Field(
        None, description="Stems whose final consonant is not devoiced")
    average_stem_size_exceptions_path: Optional[Path] = Field(
        None, description="Stems always ranked first")

    def path_for(self, kind: str) -> Optional[Path]:
        """Get the configured path of a word list kind."""
        return getattr(self, f"{kind}_path")

    @classmethod
    def from_env(cls, **overrides: Any) -> "FilterSettings":
        """
        Build settings from the GOVDE_*_PATH environment variables.

        Explicit keyword arguments that are not None win over the environment.
        """
        values = {f"{kind}_path": word_list_path_from_env(kind) for kind in WORD_LIST_KINDS}
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls.model_validate(values)

    @classmethod
    def from_mapping(cls, settings: Mapping[str, Any]) -> "FilterSettings":
        """Validate a plain settings mapping, e.g. parsed from a config file."""
        return cls.model_validate(dict(settings))


class StemResult(BaseModel):
    """Stemming result of a single token."""
    word: str = Field(..., description="Token as given")
    stem: str = Field(..., description="Selected stem")
    candidates: List[str] = Field(
        default_factory=list, description="Ranked candidate stems, best first")

    @classmethod
    def from_stemmer(cls, stemmer: Any, word: str) -> "StemResult":
        """Create a StemResult by running `stemmer` on `word`."""
        candidates = stemmer.candidates(word)
        return cls(word=word, stem=candidates[0], candidates=candidates)
