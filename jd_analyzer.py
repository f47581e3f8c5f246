# jd_analyzer.py
import logging
import re
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

MAX_KEYWORDS = 40
MIN_KEYWORD_LENGTH = 4

_NON_WORD_RE = re.compile(r"\W+")

# Tokens of 3 characters or fewer are already dropped by length.
STOP_WORDS = frozenset(
    {
        "about", "above", "after", "again", "also", "among", "because",
        "been", "before", "being", "below", "between", "both", "could",
        "does", "doing", "down", "during", "each", "every", "from",
        "further", "have", "having", "here", "into", "just", "like",
        "looking", "more", "most", "must", "only", "other", "ours", "over",
        "plus", "same", "should", "some", "such", "than", "that", "their",
        "theirs", "them", "then", "there", "these", "they", "this", "those",
        "through", "under", "until", "upon", "very", "were", "what", "when",
        "where", "which", "while", "will", "with", "within", "without",
        "would", "your", "yours", "able", "ability", "across", "including",
        "preferred", "required", "requirements", "responsibilities",
        "role", "strong", "years", "join", "company", "candidate",
        "opportunity", "work", "working",
    }
)


def extract_keywords(text: Optional[str]) -> Tuple[str, ...]:
    """
    Naive keyword extraction from a job description.

    Lowercases, turns non-word characters into spaces, drops short tokens
    and stop words, dedupes in first-seen order and keeps the first
    MAX_KEYWORDS.
    """
    if not text:
        return ()

    tokens = _NON_WORD_RE.sub(" ", text.lower()).split()

    keywords = []
    seen = set()
    for token in tokens:
        if len(token) < MIN_KEYWORD_LENGTH or token in STOP_WORDS:
            continue
        if token in seen:
            continue
        seen.add(token)
        keywords.append(token)
        if len(keywords) == MAX_KEYWORDS:
            break

    logger.debug("Extracted %d keyword(s) from %d token(s)", len(keywords), len(tokens))
    return tuple(keywords)
