# evaluator.py
import logging
import math
import re
from typing import Optional, Sequence

from models import AnalysisResult, Sentiment, StarFlags

logger = logging.getLogger(__name__)

# Substring-counted, so "so" also matches inside "also" or "solved".
FILLER_WORDS = (
    "um",
    "uh",
    "like",
    "you know",
    "so",
    "basically",
    "actually",
    "literally",
    "kind of",
    "sort of",
)

STAR_PATTERNS = {
    "situation": re.compile(
        r"\b(situation|context|background|at the time|when i was|while working|"
        r"at my (previous|last|current) (job|role|company|team)|we were facing)\b"
    ),
    "task": re.compile(
        r"\b(task|goal|objective|responsib\w*|my job was|i was asked|"
        r"needed to|had to|was supposed to|challenge)\b"
    ),
    "action": re.compile(
        r"\b(i (led|built|created|designed|developed|implemented|organized|"
        r"decided|started|wrote|took|worked|set up|introduced|analy[sz]ed)|"
        r"solved|resolved|action)\b"
    ),
    "result": re.compile(
        r"\b(result\w*|outcome|improv\w*|increas\w*|reduc\w*|achiev\w*|"
        r"deliver\w*|saved|grew|launched)\b|\d+\s?%"
    ),
}

POSITIVE_WORDS = frozenset(
    {
        "achieved", "confident", "delivered", "effective", "enjoyed",
        "excited", "good", "great", "happy", "improved", "learned", "love",
        "proud", "success", "successful", "successfully",
    }
)
NEGATIVE_WORDS = frozenset(
    {
        "bad", "blame", "conflict", "difficult", "failed", "failure",
        "frustrated", "hate", "poor", "problem", "problems", "struggled",
        "terrible", "unfortunately", "wrong",
    }
)

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_WORD_RE = re.compile(r"[a-z']+")
_ALNUM_RE = re.compile(r"[^\W_]")

# Composite score weights
KEYWORD_WEIGHT = 40
FLUENCY_WEIGHT = 20
STAR_WEIGHT = 30
PACING_GOOD = 10
PACING_POOR = 5
PACING_MIN_WORDS = 8
PACING_MAX_WORDS = 25
FILLER_TOLERANCE = 5


def round_half_up(value: float) -> int:
    # round() would send 22.5 to 22
    return int(math.floor(value + 0.5))


def keyword_overlap(answer: Optional[str], keywords: Sequence[str]) -> float:
    if not keywords:
        return 0.0
    text = (answer or "").lower()
    found = sum(1 for kw in keywords if kw in text)
    return found / len(keywords)


def count_fillers(answer: Optional[str]) -> int:
    text = (answer or "").lower()
    return sum(text.count(filler) for filler in FILLER_WORDS)


def check_star(answer: Optional[str]) -> StarFlags:
    """Look for Situation / Task / Action / Result cues; flags are independent."""
    text = (answer or "").lower()
    return StarFlags(
        **{part: bool(pattern.search(text)) for part, pattern in STAR_PATTERNS.items()}
    )


def detect_sentiment(answer: Optional[str]) -> Sentiment:
    words = _WORD_RE.findall((answer or "").lower())
    positive = sum(1 for w in words if w in POSITIVE_WORDS)
    negative = sum(1 for w in words if w in NEGATIVE_WORDS)
    return "positive" if positive >= negative else "negative"


def average_words_per_sentence(answer: Optional[str]) -> float:
    text = answer or ""
    word_count = len(text.split())
    sentences = [s for s in _SENTENCE_SPLIT_RE.split(text) if s.strip()]
    if not sentences:
        return float(word_count)
    return word_count / len(sentences)


def contains_words(answer: Optional[str]) -> bool:
    """True when the answer has at least one letter or digit; bare punctuation counts as blank."""
    return bool(_ALNUM_RE.search(answer or ""))


def composite_score(
    kw_overlap: float,
    filler_count: int,
    star_score: float,
    avg_words: float,
    has_words: bool = True,
) -> int:
    """
    Weighted heuristic: 40 keyword overlap, 20 fluency, 30 STAR, 10 pacing.

    Fluency only counts when the answer has words, so a blank answer
    scores on pacing alone.
    """
    fluency = min(1.0, max(0.0, 1 - filler_count / FILLER_TOLERANCE)) if has_words else 0.0
    pacing = (
        PACING_GOOD
        if PACING_MIN_WORDS <= avg_words <= PACING_MAX_WORDS
        else PACING_POOR
    )
    raw = (
        kw_overlap * KEYWORD_WEIGHT
        + fluency * FLUENCY_WEIGHT
        + star_score * STAR_WEIGHT
        + pacing
    )
    return max(0, round_half_up(raw))


def score_answer(answer: Optional[str], keywords: Sequence[str]) -> AnalysisResult:
    """
    Score a single answer against the JD keywords.
    Pure function: the same inputs always give the same result.
    """
    text = answer or ""

    overlap = keyword_overlap(text, keywords)
    fillers = count_fillers(text)
    star = check_star(text)
    star_score = star.hits / 4
    sentiment = detect_sentiment(text)
    avg_words = average_words_per_sentence(text)
    score = composite_score(
        overlap, fillers, star_score, avg_words, has_words=contains_words(text)
    )

    logger.debug(
        "overlap=%.2f fillers=%d star=%.2f avg_words=%.1f score=%d",
        overlap, fillers, star_score, avg_words, score,
    )

    return AnalysisResult(
        kw_overlap=overlap,
        filler_count=fillers,
        star=star,
        star_score=star_score,
        sentiment=sentiment,
        avg_words_per_sentence=avg_words,
        score=score,
    )
