import os
from pathlib import Path
from typing import Optional


DATA_DIR_ENV = "TURKISH_STEMMER_DATA_DIR"

PACKAGE_DATA_DIR = Path(__file__).parent / "data"


class StemmerConfig:
    """Where the stemmer finds its tables and how it ranks candidates."""

    def __init__(
        self,
        data_dir: Optional[str] = None,
        nominal_verb_states: str = "nominal_verb_states.yml",
        nominal_verb_suffixes: str = "nominal_verb_suffixes.yml",
        noun_states: str = "noun_states.yml",
        noun_suffixes: str = "noun_suffixes.yml",
        derivational_states: str = "derivational_states.yml",
        derivational_suffixes: str = "derivational_suffixes.yml",
        word_lists: str = "stemmer.yml",
        avg_stemmed_size: int = 4,
        cache_size: int = 1024,
    ) -> None:
        """
        Args:
            data_dir: directory holding the YAML tables, defaults to
                $TURKISH_STEMMER_DATA_DIR or the packaged data
            avg_stemmed_size: heuristic length of an average Turkish stem
            cache_size: size of the lru cache in front of stem()
        """
        self.data_dir = Path(
            data_dir or os.environ.get(DATA_DIR_ENV) or PACKAGE_DATA_DIR
        )

        self.nominal_verb_states = nominal_verb_states
        self.nominal_verb_suffixes = nominal_verb_suffixes
        self.noun_states = noun_states
        self.noun_suffixes = noun_suffixes
        self.derivational_states = derivational_states
        self.derivational_suffixes = derivational_suffixes
        self.word_lists = word_lists

        self.avg_stemmed_size = avg_stemmed_size
        self.cache_size = cache_size

    def path(self, filename: str) -> Path:
        return self.data_dir / filename

    def __repr__(self) -> str:
        return (
            f"StemmerConfig(data_dir={str(self.data_dir)!r}, "
            f"avg_stemmed_size={self.avg_stemmed_size!r}, "
            f"cache_size={self.cache_size!r})"
        )
