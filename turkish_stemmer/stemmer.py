import logging
from functools import lru_cache
from typing import Iterable, Optional

from .config import StemmerConfig
from .phonology import count_syllables, is_turkish, last_consonant
from .stripper import affix_morphological_stripper
from .tables import StemmerTables, SuffixMachine, load_tables


logger = logging.getLogger(__name__)


class TurkishStemmer:
    """
    Affix stripping stemmer for Turkish based on
    G. Eryiğit, E. Adalı, "An Affix Stripping Morphological Analyzer for Turkish" (2004)

    Stemming runs in three phases:
    - pre-process: words that are not Turkish, protected or have a single
      syllable are returned as is
    - process: the nominal verb, noun and derivational suffix machines run
      one after another, each on every stem the previous one produced
    - post-process: candidates are devoiced and the one closest to an
      average Turkish stem size is picked

    Only lowercase input is stemmed, see phonology.turkish_lower.
    """

    def __init__(
        self,
        config: Optional[StemmerConfig] = None,
        tables: Optional[StemmerTables] = None,
        tracer: Optional[logging.Logger] = None,
    ):
        self._config = config or StemmerConfig()
        self._tables = tables or load_tables(self._config)
        self._tracer = tracer or logger
        self.stem = lru_cache(maxsize=self._config.cache_size)(self._stem)

    @property
    def tables(self) -> StemmerTables:
        return self._tables

    def _stem(self, word: str) -> str:
        if not self.proceed_to_stem(word):
            return word

        stems = [word]
        for nominal_word in self.nominal_verbs_suffix_machine(word):
            stems.append(nominal_word)

            for noun_word in self.noun_suffix_machine(nominal_word):
                stems.append(noun_word)
                stems.extend(self.derivational_suffix_machine(noun_word))

        return self.stem_post_process(stems, word)

    def proceed_to_stem(self, word: Optional[str]) -> bool:
        """Whether word is worth running through the suffix machines."""
        if not isinstance(word, str) or not word:
            return False

        return (
            is_turkish(word)
            and word not in self._tables.word_lists.protected_words
            and count_syllables(word) > 1
        )

    def _strip(self, word: str, machine: SuffixMachine) -> list[str]:
        return affix_morphological_stripper(
            word, machine, self._tables.word_lists, tracer=self._tracer
        )

    def nominal_verbs_suffix_machine(self, word: str) -> list[str]:
        return self._strip(word, self._tables.nominal_verb)

    def noun_suffix_machine(self, word: str) -> list[str]:
        return self._strip(word, self._tables.noun)

    def derivational_suffix_machine(self, word: str) -> list[str]:
        return self._strip(word, self._tables.derivational)

    def stem_post_process(self, stems: Iterable[str], original_word: str) -> str:
        word_lists = self._tables.word_lists
        avg_size = self._config.avg_stemmed_size

        candidates = [
            last_consonant(stem, word_lists.last_consonant_exceptions)
            for stem in dict.fromkeys(stems)
            if stem != original_word and count_syllables(stem) > 0
        ]
        candidates = list(dict.fromkeys(candidates))
        candidates.sort(key=lambda stem: (abs(len(stem) - avg_size), len(stem)))

        self._tracer.debug("post process for %s: %s", original_word, candidates)

        for stem in candidates:
            if stem in word_lists.selection_overrides:
                return stem

        return candidates[0] if candidates else original_word


@lru_cache(maxsize=None)
def default_stemmer() -> TurkishStemmer:
    return TurkishStemmer()


def stem(word: str) -> str:
    """Stem word with the packaged tables."""
    return default_stemmer().stem(word)
