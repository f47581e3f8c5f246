# report_generator.py
import logging
from typing import Dict, List, Mapping, Optional, Sequence, Union

import pandas as pd

from evaluator import round_half_up, score_answer
from jd_analyzer import extract_keywords
from models import AnswerAnalysis, Report

logger = logging.getLogger(__name__)

Answers = Union[Mapping[int, str], Sequence[Optional[str]]]


def _answer_at(answers: Optional[Answers], index: int) -> str:
    if not answers:
        return ""
    if isinstance(answers, Mapping):
        return answers.get(index) or ""
    if index < len(answers):
        return answers[index] or ""
    return ""


def build_report(
    questions: Sequence[str],
    answers: Optional[Answers],
    jd_text: Optional[str],
) -> Report:
    """
    Score every question/answer pair and aggregate.

    - answers are either keyed by question index or listed in question
      order; a missing answer scores as ""
    - overall_score is the rounded mean of the composite scores
    - keyword_hits counts JD keywords present in at least one answer
    """
    keywords = extract_keywords(jd_text)

    items: List[AnswerAnalysis] = []
    for index, question in enumerate(questions):
        answer = _answer_at(answers, index)
        items.append(
            AnswerAnalysis(
                index=index,
                question=question,
                answer=answer,
                analysis=score_answer(answer, keywords),
            )
        )

    overall = (
        round_half_up(sum(item.analysis.score for item in items) / len(items))
        if items
        else 0
    )

    answer_texts = [item.answer.lower() for item in items if item.answer]
    keyword_hits = sum(
        1 for kw in keywords if any(kw in text for text in answer_texts)
    )

    logger.info(
        "Report built: %d answer(s), overall=%d, keyword hits=%d/%d",
        len(items), overall, keyword_hits, len(keywords),
    )

    return Report(
        items=tuple(items),
        overall_score=overall,
        keyword_hits=keyword_hits,
        keywords=keywords,
    )


# ---------- EXPORT ----------

def report_to_dataframe(report: Report) -> pd.DataFrame:
    """One row per question, metrics as columns."""
    rows: List[Dict[str, object]] = []
    for item in report.items:
        a = item.analysis
        rows.append(
            {
                "Question #": item.index + 1,
                "Question": item.question,
                "Score": a.score,
                "Keyword overlap": round(a.kw_overlap, 2),
                "Filler words": a.filler_count,
                "Situation": a.star.situation,
                "Task": a.star.task,
                "Action": a.star.action,
                "Result": a.star.result,
                "STAR score": a.star_score,
                "Sentiment": a.sentiment,
                "Avg words / sentence": round(a.avg_words_per_sentence, 1),
            }
        )
    columns = [
        "Question #", "Question", "Score", "Keyword overlap", "Filler words",
        "Situation", "Task", "Action", "Result", "STAR score", "Sentiment",
        "Avg words / sentence",
    ]
    return pd.DataFrame(rows, columns=columns)


def report_to_json(report: Report) -> str:
    return report.model_dump_json(indent=2)
