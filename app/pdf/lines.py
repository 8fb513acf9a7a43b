"""Line reconstruction from positioned text runs."""

from collections.abc import Iterable

from app.extraction.models import PageTextFragment, TextRun


def reconstruct_lines(runs: Iterable[TextRun]) -> str:
    """Join runs into text, starting a new line whenever the baseline changes.

    Runs sharing the current baseline are concatenated as-is, with no added
    spacing. The first run never starts a new line.
    """
    parts: list[str] = []
    current_baseline: float | None = None
    for run in runs:
        if current_baseline is not None and run.baseline != current_baseline:
            parts.append("\n")
        parts.append(run.text)
        current_baseline = run.baseline
    return "".join(parts)


def join_pages(pages: Iterable[PageTextFragment], separator: str = "\n\n") -> str:
    """Render every page independently and append them in page order."""
    ordered = sorted(pages, key=lambda page: page.page_number)
    return separator.join(reconstruct_lines(page.runs) for page in ordered)
