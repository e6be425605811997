from collections import Counter
from .text_utils import tokenize, is_stop_word, format_density

TOP_WORDS_COUNT = 15
TOP_NGRAMS_COUNT = 10


def _ngrams(tokens: list[str], n: int) -> Counter:
    """Counts contiguous n-grams, dropping any window that contains a stop word."""
    grams = Counter()
    for i in range(len(tokens) - n + 1):
        window = tokens[i:i + n]
        if any(is_stop_word(t) for t in window):
            continue
        grams[' '.join(window)] += 1
    return grams


def _top(counts: Counter, n: int, total: int, label: str) -> list[dict]:
    # most_common keeps first-seen order between equal counts
    return [
        {label: key, "count": count, "density": format_density(count, total)}
        for key, count in counts.most_common(n)
    ]


def _count_occurrences(haystack: str, needle: str) -> int:
    """Substring occurrences of needle in haystack, overlapping matches included."""
    if not needle:
        return 0
    count = 0
    idx = haystack.find(needle)
    while idx != -1:
        count += 1
        idx = haystack.find(needle, idx + 1)
    return count


def analyze_keywords(text: str, target_keyword: str | None = None,
                     top_words: int = TOP_WORDS_COUNT, top_ngrams: int = TOP_NGRAMS_COUNT) -> dict:
    tokens = tokenize(text)
    total_words = len(tokens)
    if total_words == 0:
        return {"error": "No words found in the provided text."}

    word_counts = Counter(t for t in tokens if not is_stop_word(t))
    bigrams = _ngrams(tokens, 2)
    trigrams = _ngrams(tokens, 3)

    target_result = None
    if target_keyword:
        target_words = target_keyword.lower().split()
        target = " ".join(target_words)
        if len(target_words) <= 1:
            count = word_counts.get(target, 0)
        else:
            # Phrase matching runs over the space-joined token stream, so it is
            # substring-based and counts overlapping matches.
            count = _count_occurrences(' '.join(tokens), target)
        target_result = {
            "keyword": target_keyword,
            "count": count,
            "density": format_density(count, total_words),
        }

    return {
        "totalWords": total_words,
        "uniqueWords": len(set(tokens)),
        "targetKeyword": target_result,
        "topSingleWords": _top(word_counts, top_words, total_words, "word"),
        "topBigrams": _top(bigrams, top_ngrams, total_words, "phrase"),
        "topTrigrams": _top(trigrams, top_ngrams, total_words, "phrase"),
    }
