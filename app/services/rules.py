from __future__ import annotations
from typing import List
import math
import re
from app.core.config import (
    WORDS_PER_MINUTE, OPTIMAL_LENGTH, LONG_PARAGRAPH_WORDS, MAX_KEYWORDS, MAX_HASHTAGS,
)
from app.models.report import (
    Metrics, Readability, Sentiment, Keyword, Hashtags, Engagement, EngagementFactors, Structure,
)

POSITIVE = (
    "good", "great", "excellent", "amazing", "wonderful", "fantastic",
    "love", "best", "awesome", "perfect", "happy", "success", "win",
    "beautiful", "brilliant", "exciting", "enjoy", "delighted",
)
NEGATIVE = (
    "bad", "terrible", "awful", "horrible", "worst", "hate", "poor",
    "fail", "failure", "disappointed", "wrong", "problem", "issue",
    "difficult", "hard", "sad", "angry", "frustrating",
)
STOP_WORDS = {
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
    "of", "with", "by", "from", "as", "is", "was", "are", "be", "been",
    "have", "has", "had", "do", "does", "did", "will", "would", "should",
    "can", "could", "may", "might", "must", "this", "that", "these", "those",
}

_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_PARAGRAPH_SPLIT = re.compile(r"\n\s*\n")
_WHITESPACE_SPLIT = re.compile(r"\s+")
_VOWEL_RUN = re.compile(r"[aeiouy]+")
_NON_WORD = re.compile(r"[^\w\s]", re.ASCII)
_HASHTAG = re.compile(r"#\w+", re.ASCII)
_POSITIVE_RE = [re.compile(rf"\b{w}\b", re.IGNORECASE | re.ASCII) for w in POSITIVE]
_NEGATIVE_RE = [re.compile(rf"\b{w}\b", re.IGNORECASE | re.ASCII) for w in NEGATIVE]
_CALL_TO_ACTION = re.compile(
    r"\b(click|subscribe|follow|share|comment|like|buy|download|join|register|"
    r"sign up|learn more|get started|try now|shop now)\b",
    re.IGNORECASE | re.ASCII,
)
_EMOJI = re.compile("[\U0001F600-\U0001F64F\U0001F300-\U0001F5FF\U0001F680-\U0001F6FF\U0001F1E0-\U0001F1FF]")
_DIGIT = re.compile(r"[0-9]")
_URL = re.compile(r"https?://\S+")


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round .5 upwards (towards +inf) instead of Python's banker's rounding."""
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def text_length(s: str) -> int:
    # UTF-16 code units, so an emoji counts as two characters
    return len(s.encode("utf-16-le")) // 2


def split_words(text: str) -> List[str]:
    return text.split()


def split_tokens(text: str) -> List[str]:
    # leading or trailing whitespace yields an empty edge token, which still counts
    return _WHITESPACE_SPLIT.split(text)


def split_sentences(text: str) -> List[str]:
    return [s for s in _SENTENCE_SPLIT.split(text) if s.strip()]


def split_paragraphs(text: str) -> List[str]:
    return [p for p in _PARAGRAPH_SPLIT.split(text) if p.strip()]


def text_metrics(text: str) -> Metrics:
    words = split_words(text)
    word_count = len(words)
    sentence_count = len(split_sentences(text))

    avg_word = sum(text_length(w) for w in words) / word_count if word_count else 0
    avg_sentence = word_count / sentence_count if sentence_count else 0

    return Metrics(
        character_count=text_length(text),
        word_count=word_count,
        sentence_count=sentence_count,
        paragraph_count=len(split_paragraphs(text)),
        average_word_length=round_half_up(avg_word, 1),
        average_sentence_length=round_half_up(avg_sentence, 1),
        reading_time_minutes=math.ceil(word_count / WORDS_PER_MINUTE),
    )


def estimate_syllables(text: str) -> int:
    syllables = 0
    for word in split_tokens(text.lower()):
        if text_length(word) <= 3:
            syllables += 1
        else:
            syllables += len(_VOWEL_RUN.findall(word)) or 1
    return syllables


def readability_level(score: float) -> tuple[str, int]:
    # 70-79 and 60-69 are both "Moderate" but keep separate grade levels
    if score >= 90:
        return "Very Easy", 5
    if score >= 80:
        return "Easy", 6
    if score >= 70:
        return "Moderate", 8
    if score >= 60:
        return "Moderate", 10
    if score >= 50:
        return "Difficult", 12
    return "Very Difficult", 16


def readability(text: str, metrics: Metrics) -> Readability:
    """Flesch Reading Ease, clamped to 0-100."""
    if metrics.sentence_count == 0 or metrics.word_count == 0:
        return Readability(score=0, level="Very Difficult", grade_level=16)

    avg_sentence_len = metrics.word_count / metrics.sentence_count
    avg_syllables = estimate_syllables(text) / metrics.word_count

    score = 206.835 - 1.015 * avg_sentence_len - 84.6 * avg_syllables
    score = max(0.0, min(100.0, score))
    level, grade = readability_level(score)
    return Readability(score=int(round_half_up(score)), level=level, grade_level=grade)


def _count(patterns, text: str) -> int:
    return sum(len(p.findall(text)) for p in patterns)


def sentiment(text: str) -> Sentiment:
    lower = text.lower()
    pos = _count(_POSITIVE_RE, lower)
    neg = _count(_NEGATIVE_RE, lower)
    total = pos + neg

    score = (pos - neg) / total if total else 0.0
    if score > 0.1:
        label = "Positive"
    elif score < -0.1:
        label = "Negative"
    else:
        label = "Neutral"
    # 0.5 marks "no signal", distinct from a balanced text
    confidence = min(total / 10, 1.0) if total else 0.5

    return Sentiment(
        score=round_half_up(score, 2),
        label=label,
        confidence=round_half_up(confidence, 2),
    )


def keywords(text: str) -> List[Keyword]:
    words = [
        w for w in _NON_WORD.sub(" ", text.lower()).split()
        if len(w) > 3 and w not in STOP_WORDS
    ]
    freq: dict[str, int] = {}
    for w in words:
        freq[w] = freq.get(w, 0) + 1

    ranked = sorted(freq.items(), key=lambda kv: kv[1], reverse=True)
    return [
        Keyword(word=w, count=c, relevance=min(c / len(words) * 100, 100))
        for w, c in ranked[:MAX_KEYWORDS]
    ]


def hashtags(text: str, ranked: List[Keyword]) -> Hashtags:
    existing = list(dict.fromkeys(tag.lower() for tag in _HASHTAG.findall(text)))
    suggested = [
        tag for tag in (f"#{k.word}" for k in ranked[:MAX_HASHTAGS])
        if tag.lower() not in existing
    ]
    return Hashtags(existing=existing, suggested=suggested)


def engagement(text: str) -> Engagement:
    low, high = OPTIMAL_LENGTH
    factors = EngagementFactors(
        has_call_to_action=bool(_CALL_TO_ACTION.search(text)),
        has_question="?" in text,
        has_emoji=bool(_EMOJI.search(text)),
        has_hashtags=bool(_HASHTAG.search(text)),
        has_numbers=bool(_DIGIT.search(text)),
        has_url=bool(_URL.search(text)),
        optimal_length=low <= len(split_tokens(text)) <= high,
    )
    flags = factors.model_dump().values()
    score = int(round_half_up(100 * sum(flags) / len(flags)))
    return Engagement(score=score, factors=factors)


def structure(text: str) -> Structure:
    lengths = [len(split_tokens(p)) for p in split_paragraphs(text)]
    if not lengths:
        return Structure()

    mean = sum(lengths) / len(lengths)
    std_dev = math.sqrt(sum((n - mean) ** 2 for n in lengths) / len(lengths))
    if std_dev < 10:
        variation = "Low"
    elif std_dev < 30:
        variation = "Medium"
    else:
        variation = "High"

    return Structure(
        has_intro=lengths[0] > LONG_PARAGRAPH_WORDS,
        has_body=len(lengths) > 1,
        has_conclusion=len(lengths) > 2 and lengths[-1] > LONG_PARAGRAPH_WORDS,
        paragraph_length_variation=variation,
    )
