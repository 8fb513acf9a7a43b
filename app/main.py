import json
from pathlib import Path

import typer

from app.analysis.exceptions import AnalysisError
from app.config.settings import Settings
from app.extraction.exceptions import ExtractionError
from app.logging.logger import Log
from app.processor.exceptions import FileReadError
from app.processor.file_loader import FileLoader
from app.processor.processor import build_processor

cli = typer.Typer(add_completion=False)


def _emit(payload: dict[str, object]) -> None:
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


@cli.command()
def main(
    path: Path = typer.Argument(..., help="Document to extract text from"),
    mime_type: str | None = typer.Option(
        None, "--mime-type", "-t", help="Declared media type; guessed from the file name if omitted"
    ),
    analyze: bool = typer.Option(
        False, "--analyze", help="Also generate an explanation and practice questions"
    ),
) -> None:
    """Entry point: load settings -> read file -> extract (-> analyze) -> print JSON."""
    settings = Settings()
    Log.configure(settings.log_level)

    try:
        artifact = FileLoader().load(path, mime_type)
        processor = build_processor(settings, analyze=analyze)
        context = processor.process(artifact)
    except ExtractionError as exc:
        _emit(exc.to_dict())
        raise typer.Exit(code=1) from exc
    except AnalysisError as exc:
        _emit({"errorKind": "AnalysisFailed", "message": str(exc)})
        raise typer.Exit(code=1) from exc
    except FileReadError as exc:
        _emit({"errorKind": "FileReadFailed", "message": str(exc)})
        raise typer.Exit(code=1) from exc

    _emit(context.to_payload())


if __name__ == "__main__":
    cli()
