from pathlib import Path

from app.analysis.exceptions import AnalysisError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"

EXPLANATION_PROMPT = "explanation_prompt.txt"
QUESTIONS_PROMPT = "questions_prompt.txt"


def load_prompt(name: str, path: Path | None = None) -> str:
    """Load a system prompt.

    Args:
        name: File name of a bundled prompt, used when `path` is None.
        path: Explicit prompt file overriding the bundled one.

    Returns:
        The prompt text without surrounding whitespace.

    Raises:
        AnalysisError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / name
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise AnalysisError(f"Failed to load prompt '{name}': {exc}") from exc
