from .text_utils import (
    count_syllables,
    split_sentences,
    split_words,
    split_paragraphs,
    round_half_up,
)

MIN_WORDS = 10
WORDS_PER_MINUTE = 238

# (lower bound, label), checked top-down
EASE_BANDS = (
    (90, "Very Easy (5th grade)"),
    (80, "Easy (6th grade)"),
    (70, "Fairly Easy (7th grade)"),
    (60, "Standard (8th-9th grade)"),
    (50, "Fairly Difficult (10th-12th grade)"),
    (30, "Difficult (college level)"),
)
EASE_FLOOR_LABEL = "Very Difficult (graduate level)"

# (upper bound, label), checked bottom-up
GRADE_BANDS = (
    (5, "Elementary school level"),
    (8, "Middle school level"),
    (12, "High school level"),
    (16, "College level"),
)
GRADE_CEILING_LABEL = "Graduate level"


def interpret_reading_ease(score: float) -> str:
    for threshold, label in EASE_BANDS:
        if score >= threshold:
            return label
    return EASE_FLOOR_LABEL


def interpret_grade_level(grade: float) -> str:
    for threshold, label in GRADE_BANDS:
        if grade <= threshold:
            return label
    return GRADE_CEILING_LABEL


def _tips(avg_words_per_sentence: float, avg_syllables_per_word: float, ease: float,
          paragraph_count: int, word_count: int) -> list[str]:
    tips = []
    if avg_words_per_sentence > 25:
        tips.append(
            f"Sentences are long (avg {round_half_up(avg_words_per_sentence):.0f} words). "
            "Break them up for better readability."
        )
    if avg_syllables_per_word > 1.7:
        tips.append("Many complex words. Use simpler alternatives where possible.")
    if ease < 50:
        tips.append("Text is difficult to read. Aim for a Flesch score of 60+ for general audiences.")
    if paragraph_count == 1 and word_count > 100:
        tips.append("Single large paragraph. Break into smaller paragraphs for better scannability.")
    return tips


def score_readability(text: str) -> dict:
    """
    Flesch Reading Ease and Flesch-Kincaid Grade Level for a block of text,
    with basic counts, reading time and improvement tips.

    Returns {"error": ...} when the text has fewer than MIN_WORDS words.
    """
    words = split_words(text)
    word_count = len(words)
    if word_count < MIN_WORDS:
        return {"error": f"Text too short for meaningful analysis. Provide at least {MIN_WORDS} words."}

    sentence_count = max(len(split_sentences(text)), 1)
    paragraph_count = len(split_paragraphs(text))
    syllable_count = sum(count_syllables(w) for w in words)

    asl = word_count / sentence_count
    asw = syllable_count / word_count

    ease = 206.835 - 1.015 * asl - 84.6 * asw
    ease = max(0.0, min(100.0, round_half_up(ease, 1)))
    grade = 0.39 * asl + 11.8 * asw - 15.59
    grade = max(0.0, round_half_up(grade, 1))

    return {
        "fleschReadingEase": {"score": ease, "interpretation": interpret_reading_ease(ease)},
        "fleschKincaidGrade": {"score": grade, "interpretation": interpret_grade_level(grade)},
        "stats": {
            "wordCount": word_count,
            "sentenceCount": sentence_count,
            "syllableCount": syllable_count,
            "avgWordsPerSentence": round_half_up(asl, 1),
            "avgSyllablesPerWord": round_half_up(asw, 2),
            "readingTimeMinutes": round_half_up(word_count / WORDS_PER_MINUTE, 1),
            "paragraphCount": paragraph_count,
        },
        "tips": _tips(asl, asw, ease, paragraph_count, word_count),
    }
