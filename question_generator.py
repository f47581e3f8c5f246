# question_generator.py
from typing import List, Optional, Sequence, Tuple

from config import settings
from evaluator import round_half_up

KEYWORD_TEMPLATES = (
    "Tell me about a time you used {keyword} to solve a real problem.",
    "How have you applied {keyword} in a recent project, and what was the outcome?",
    "Describe a challenge you faced involving {keyword}. What did you do?",
)

GENERIC_QUESTIONS = (
    "Tell me about a time you had to deliver under a tight deadline.",
    "Describe a situation where you disagreed with a teammate. How did you handle it?",
    "Walk me through the project you are most proud of.",
    "Tell me about a mistake you made and what you changed afterwards.",
    "Why are you interested in this role?",
)

# Leave room for at least a couple of behavioural questions
KEYWORD_QUESTION_SHARE = 0.6


def generate_questions(
    keywords: Sequence[str],
    max_questions: Optional[int] = None,
) -> Tuple[str, ...]:
    """
    Build interview questions by slotting the leading JD keywords into
    rotating templates, then topping up with generic behavioural questions.
    """
    limit = settings.MAX_QUESTIONS if max_questions is None else max_questions
    if limit <= 0:
        return ()

    keyword_slots = min(len(keywords), max(1, round_half_up(limit * KEYWORD_QUESTION_SHARE)))

    questions: List[str] = []
    for i, keyword in enumerate(keywords[:keyword_slots]):
        template = KEYWORD_TEMPLATES[i % len(KEYWORD_TEMPLATES)]
        questions.append(template.format(keyword=keyword))

    for q in GENERIC_QUESTIONS:
        if len(questions) >= limit:
            break
        questions.append(q)

    # dict keeps first-seen order
    return tuple(dict.fromkeys(questions))[:limit]
