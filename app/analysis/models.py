from dataclasses import dataclass


@dataclass(frozen=True)
class AnalysisResult:
    """Simplified explanation and practice questions for a text."""

    explanation: str
    questions: str

    def to_dict(self) -> dict[str, str]:
        return {"explanation": self.explanation, "questions": self.questions}
