class AnalysisError(Exception):
    """Raised when explanation or question generation fails."""


class AnalysisNetworkError(AnalysisError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
