from .config import StemmerConfig
from .errors import ConfigurationError, TurkishStemmerError
from .phonology import (
    count_syllables,
    has_vowel_harmony,
    last_consonant,
    turkish_lower,
    vowels,
)
from .stemmer import TurkishStemmer, default_stemmer, stem
from .tables import StemmerTables, load_tables
