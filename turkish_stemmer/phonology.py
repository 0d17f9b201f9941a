"""Turkish phonology helpers. Expect input lowercased with turkish_lower()."""

import re
from typing import Iterable, Optional


VOWELS = "üiıueöao"
CONSONANTS = "bcçdfgğhjklmnprsştvyz"
ROUNDED_VOWELS = "oöuü"
UNROUNDED_VOWELS = "iıea"
FOLLOWING_ROUNDED_VOWELS = "aeuü"
FRONT_VOWELS = "eiöü"
BACK_VOWELS = "ıuao"

ALPHABET_REGEX = re.compile(r"^[abcçdefgğhıijklmnoöprsştuüvyz]+$")

LAST_CONSONANTS = {"b": "p", "c": "ç", "d": "t", "ğ": "k"}

UPPERCASE_MAP = str.maketrans({"I": "ı", "İ": "i"})


def turkish_lower(text: str) -> str:
    return text.translate(UPPERCASE_MAP).lower()


def is_turkish(word: str) -> bool:
    """True if word is made only of lowercase Turkish letters."""
    return bool(ALPHABET_REGEX.match(word))


def vowels(word: str) -> list[str]:
    """The word with every consonant removed, one list item per character."""
    return [char for char in word if char not in CONSONANTS]


def count_syllables(word: str) -> int:
    """In Turkish the number of syllables equals the number of vowels."""
    return len(vowels(word))


def has_roundness(vowel: Optional[str], candidate: Optional[str]) -> bool:
    if not vowel or not candidate:
        return True

    if vowel in UNROUNDED_VOWELS and candidate in UNROUNDED_VOWELS:
        return True
    if vowel in ROUNDED_VOWELS and candidate in FOLLOWING_ROUNDED_VOWELS:
        return True

    return False


def has_frontness(vowel: Optional[str], candidate: Optional[str]) -> bool:
    if not vowel or not candidate:
        return True

    if vowel in FRONT_VOWELS and candidate in FRONT_VOWELS:
        return True
    if vowel in BACK_VOWELS and candidate in BACK_VOWELS:
        return True

    return False


def vowel_harmony(vowel: Optional[str], candidate: Optional[str]) -> bool:
    return has_roundness(vowel, candidate) and has_frontness(vowel, candidate)


def has_vowel_harmony(word: str) -> bool:
    """
    Check the last two vowels of word against Turkish vowel harmony
    https://en.wikipedia.org/wiki/Vowel_harmony#Turkish

    A word with fewer than two vowels trivially has harmony.
    """
    word_vowels = vowels(word)
    vowel = word_vowels[-2] if len(word_vowels) > 1 else None
    candidate = word_vowels[-1] if word_vowels else None

    return vowel_harmony(vowel, candidate)


def last_consonant(word: str, exceptions: Iterable[str] = ()) -> str:
    """Devoice a word-final b, c, d or ğ unless word is an exception."""
    if not word or word in exceptions:
        return word

    if (replacement := LAST_CONSONANTS.get(word[-1])) is not None:
        return word[:-1] + replacement

    return word
