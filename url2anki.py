# url2anki.py
"""Scrape question/answer pairs off a web page and save them as Anki-ready flashcards.

The pipeline is fetch -> extract -> pair -> (preview) -> export, run once
and stopped by the first error.
"""
from dataclasses import dataclass
from enum import Enum
from typing import List

from loguru import logger

from cards import Flashcard
from errors import UnsupportedFormatError
from exporter import export, formats_for
from extractor import SoupSelectorEvaluator, extract
from fetcher import fetch
from pairer import pair
from previewer import Decision, console_confirm, preview

__version__ = "0.1.0"

DEFAULT_OUTPUT_FILE = "./anki_cards.csv"


@dataclass(frozen=True)
class Config:
    url: str
    question_selector: str
    answer_selector: str
    output_file: str = DEFAULT_OUTPUT_FILE
    preview: bool = False


class Outcome(Enum):
    EXPORTED = "exported"
    ABORTED = "aborted"


def scrape_flashcards(url, question_selector, answer_selector, fetcher=fetch, evaluator=None) -> List[Flashcard]:
    evaluator = evaluator or SoupSelectorEvaluator()
    with fetcher(url) as body:
        questions, answers = extract(body, question_selector, answer_selector, evaluator)
    return pair(questions, answers, text_of=evaluator.text)


def run(config, confirm=console_confirm, out=None, fetcher=fetch, evaluator=None):
    """Run the whole pipeline for `config`.

    Returns Outcome.ABORTED when the operator declines the preview, in which
    case nothing is written. Stage failures propagate as Url2AnkiError.
    """
    if not formats_for(config.output_file):
        raise UnsupportedFormatError(config.output_file)

    cards = scrape_flashcards(
        config.url, config.question_selector, config.answer_selector,
        fetcher=fetcher, evaluator=evaluator,
    )
    logger.debug("Scraped {} flashcards from {}", len(cards), config.url)

    if config.preview and preview(cards, confirm=confirm, out=out) is Decision.ABORTED:
        logger.debug("Preview declined, nothing exported")
        return Outcome.ABORTED

    export(cards, config.output_file)
    return Outcome.EXPORTED
