class InterviewCoachError(Exception):
    """Parent of every error raised by the coach."""


class QuestionIndexError(InterviewCoachError, IndexError):
    def __init__(self, index: int, total: int):
        self.index = index
        self.total = total
        super().__init__(
            f"Question index {index} is out of range for {total} question(s)."
        )
