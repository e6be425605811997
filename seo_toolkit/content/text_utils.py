import math
import re

# English function words excluded from keyword ranking
STOP_WORDS = frozenset([
    "a", "an", "the", "and", "or", "but", "in", "on", "at", "to", "for",
    "of", "with", "by", "from", "is", "are", "was", "were", "be", "been",
    "being", "have", "has", "had", "do", "does", "did", "will", "would",
    "could", "should", "may", "might", "shall", "can", "it", "its",
    "this", "that", "these", "those", "i", "you", "he", "she", "we",
    "they", "me", "him", "her", "us", "them", "my", "your", "his",
    "our", "their", "what", "which", "who", "whom", "how", "when",
    "where", "why", "not", "no", "so", "if", "then", "than", "as",
    "up", "out", "about", "into", "over", "after", "also", "just",
    "more", "most", "very", "all", "each", "every", "both", "few",
    "some", "any", "other", "such", "only", "own", "same", "too",
])

VOWELS = "aeiouy"

_NON_TOKEN_RE = re.compile(r"[^a-z0-9\s'-]")
_NON_WORD_RE = re.compile(r"[^a-zA-Z0-9\s'-]")
_SENTENCE_END_RE = re.compile(r"[.!?]+")
_PARAGRAPH_BREAK_RE = re.compile(r"\n\s*\n")


def tokenize(text: str) -> list[str]:
    """Lowercase word tokens longer than one character, punctuation removed."""
    cleaned = _NON_TOKEN_RE.sub(" ", (text or "").lower())
    return [token for token in cleaned.split() if len(token) > 1]


def is_stop_word(token: str) -> bool:
    return token in STOP_WORDS


def split_sentences(text: str) -> list[str]:
    return [s.strip() for s in _SENTENCE_END_RE.split(text or "") if s.strip()]


def split_words(text: str) -> list[str]:
    return _NON_WORD_RE.sub(" ", text or "").split()


def split_paragraphs(text: str) -> list[str]:
    return [p for p in _PARAGRAPH_BREAK_RE.split(text or "") if p.strip()]


def count_syllables(word: str) -> int:
    word = re.sub(r'[^a-z]', '', word.lower())
    if len(word) <= 3:
        return 1
    syllable_count = 0
    prev_char_was_vowel = False
    for char in word:
        is_vowel = char in VOWELS
        if is_vowel and not prev_char_was_vowel:
            syllable_count += 1
        prev_char_was_vowel = is_vowel
    # silent trailing "e", then consonant + "le" ("table", "simple")
    if word.endswith("e") and syllable_count > 1:
        syllable_count -= 1
    if word.endswith("le") and word[-3] not in VOWELS:
        syllable_count += 1
    return max(1, syllable_count)


def round_half_up(value: float, digits: int = 0) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def format_density(count: int, total: int) -> str:
    if total <= 0:
        return "0.00%"
    return f"{count / total * 100:.2f}%"
