# cli.py
import sys
from typing import Optional
from urllib.parse import urlparse

import typer
from loguru import logger
from pydantic import ValidationError

from errors import ExportError, Url2AnkiError
from settings import Url2AnkiSettings
from url2anki import Config, Outcome, __version__, run

app = typer.Typer(
    help="Generate Anki-formatted flashcards from a given URL and export them "
    "to a file to be imported into Anki",
    add_completion=False,
)


def configure_logging(debug):
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if debug else "INFO")


def _required(value, option, env_name):
    if not value:
        raise typer.BadParameter(f"missing value, pass it or set {env_name}", param_hint=option)
    return value


def _absolute_url(value):
    parsed = urlparse(value)
    if not parsed.scheme or not parsed.netloc:
        raise typer.BadParameter(f"{value!r} is not an absolute URL", param_hint="'--url'")
    return parsed.geturl()


@app.callback(invoke_without_command=True)
def root(
    ctx: typer.Context,
    url: Optional[str] = typer.Option(
        None, "--url", "-u",
        help="The URL to scrape for flashcards (EX: https://kubernetes.io/docs/reference/glossary/?all=true)",
    ),
    question_selector: Optional[str] = typer.Option(
        None, "--question-selector", "-q", help="The HTML selector for the questions (EX: div.term-name)"
    ),
    answer_selector: Optional[str] = typer.Option(
        None, "--answer-selector", "-a", help="The HTML selector for the answers (EX: div.term-definition)"
    ),
    output_file: Optional[str] = typer.Option(
        None, "--output-file", "-o", help="The filename (including extension) to export flashcards to"
    ),
    preview: bool = typer.Option(False, "--preview", "-p", help="Preview the flashcards before exporting"),
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug-level logging"),
) -> None:
    """
    Scrape question/answer pairs from a page into a .json or .csv file.
    """
    if ctx.invoked_subcommand is not None:
        configure_logging(debug)
        return

    try:
        settings = Url2AnkiSettings()
    except ValidationError as e:
        typer.echo(f"Error loading configuration: {e}", err=True)
        raise typer.Exit(1)

    configure_logging(debug or settings.debug)

    config = Config(
        url=_absolute_url(_required(url or settings.url, "'--url'", "URL2ANKI_URL")),
        question_selector=_required(
            question_selector or settings.question_selector,
            "'--question-selector'", "URL2ANKI_QUESTION_SELECTOR",
        ),
        answer_selector=_required(
            answer_selector or settings.answer_selector,
            "'--answer-selector'", "URL2ANKI_ANSWER_SELECTOR",
        ),
        output_file=output_file or settings.output_file,
        preview=preview or settings.preview,
    )

    try:
        outcome = run(config)
    except ExportError as e:
        typer.echo(f"Error exporting flashcards: {e}", err=True)
        raise typer.Exit(1)
    except Url2AnkiError as e:
        typer.echo(f"Error scraping flashcards: {e}", err=True)
        raise typer.Exit(1)

    if outcome is Outcome.ABORTED:
        typer.echo("Aborting.")
        return
    typer.echo(f"Flashcards exported to {config.output_file}")


@app.command()
def version() -> None:
    """
    Print the url2anki version.
    """
    typer.echo(__version__)


def main():
    app()


if __name__ == "__main__":
    main()
