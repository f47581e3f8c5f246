# session.py
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

from exceptions import QuestionIndexError
from jd_analyzer import extract_keywords
from models import Report
from question_generator import generate_questions
from report_generator import build_report


class InterviewSession(BaseModel):
    """
    Everything one practice run holds: JD, questions, answers, report.

    Every action returns a new session; the UI swaps the whole value in
    st.session_state instead of editing fields. answers[i] belongs to
    questions[i].
    """

    model_config = ConfigDict(frozen=True)

    jd_text: str = ""
    keywords: Tuple[str, ...] = ()
    questions: Tuple[str, ...] = ()
    answers: Tuple[str, ...] = ()
    report: Optional[Report] = None

    @classmethod
    def start(cls, jd_text: str, max_questions: Optional[int] = None) -> "InterviewSession":
        keywords = extract_keywords(jd_text)
        questions = generate_questions(keywords, max_questions)
        return cls(
            jd_text=jd_text,
            keywords=keywords,
            questions=questions,
            answers=("",) * len(questions),
        )

    def answer_for(self, index: int) -> str:
        if 0 <= index < len(self.answers):
            return self.answers[index]
        return ""

    def with_answer(self, index: int, text: str) -> "InterviewSession":
        if not 0 <= index < len(self.questions):
            raise QuestionIndexError(index, len(self.questions))
        answers = tuple(
            text if i == index else self.answer_for(i)
            for i in range(len(self.questions))
        )
        # answers changed, so any existing report is stale
        return self.model_copy(update={"answers": answers, "report": None})

    def analyze(self) -> "InterviewSession":
        report = build_report(self.questions, self.answers, self.jd_text)
        return self.model_copy(update={"report": report})

    @property
    def answered_count(self) -> int:
        return sum(1 for answer in self.answers if answer.strip())
