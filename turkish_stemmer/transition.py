import re
from typing import NamedTuple, Optional

from .phonology import CONSONANTS, VOWELS, has_vowel_harmony
from .tables import SuffixRule, WordLists


class StemAnswer(NamedTuple):
    matched: bool
    word: str
    suffix_applied: Optional[str] = None


def valid_optional_letter(word: str, letter: str) -> tuple[bool, Optional[str]]:
    """
    Check whether the connecting letter at the end of word can be stripped.

    Returns (answer, matched_char). When word does not end with letter the
    answer is (True, None). A connecting vowel must follow a consonant and a
    connecting consonant must follow a vowel.

    >>> valid_optional_letter("okula", "a")
    (True, 'a')
    """
    if not (match := re.search(f"({letter})$", word)) or not match.group():
        return True, None

    matched_char = match.group()
    previous_char = word[-len(matched_char) - 1 : -len(matched_char)]

    if matched_char in VOWELS:
        answer = bool(previous_char) and previous_char in CONSONANTS
    else:
        answer = bool(previous_char) and previous_char in VOWELS

    return answer, matched_char


def harmony_allows(word: str, rule: SuffixRule, word_lists: WordLists) -> bool:
    if not rule.check_harmony:
        return True

    if word in word_lists.protected_words:
        return False

    return has_vowel_harmony(word) or word in word_lists.vowel_harmony_exceptions


def mark_stem(
    word: str, rule: SuffixRule, word_lists: WordLists = WordLists()
) -> StemAnswer:
    """
    Try to strip the suffix described by rule from the end of word.

    A match never leaves the word unchanged, so every accepted transition
    makes the word strictly shorter.
    """
    if not harmony_allows(word, rule, word_lists):
        return StemAnswer(False, word)

    if not (match := re.search(f"({rule.regex})$", word)) or not match.group():
        return StemAnswer(False, word)

    suffix_applied = match.group()
    new_word = word[: -len(suffix_applied)]

    if rule.optional_letter:
        answer, letter = valid_optional_letter(new_word, rule.optional_letter)

        if not answer:
            return StemAnswer(False, word)
        if letter:
            new_word = new_word[: -len(letter)]
            suffix_applied = letter + suffix_applied

    return StemAnswer(True, new_word, suffix_applied)
