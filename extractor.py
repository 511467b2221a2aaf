# extractor.py
from typing import List, Protocol, Tuple

from bs4 import BeautifulSoup, ParserRejectedMarkup
from loguru import logger
from soupsieve import SelectorSyntaxError
from urllib3.exceptions import HTTPError as StreamError

from errors import ParseError


class SelectorEvaluator(Protocol):
    """Anything that can turn a body into a document and query it with CSS."""

    def parse(self, body): ...

    def select(self, document, selector: str) -> list: ...

    def text(self, node) -> str: ...


class SoupSelectorEvaluator:
    def __init__(self, features="html.parser"):
        self.features = features

    def parse(self, body):
        try:
            return BeautifulSoup(body, self.features)
        except (OSError, StreamError, ParserRejectedMarkup) as e:
            raise ParseError(e) from e

    def select(self, document, selector):
        try:
            return document.select(selector)
        except SelectorSyntaxError as e:
            # an unusable selector simply matches nothing
            logger.warning("Selector {!r} matches nothing: {}", selector, e)
            return []

    def text(self, node):
        return node.get_text()


def extract(body, question_selector, answer_selector, evaluator=None) -> Tuple[List, List]:
    """Parse `body` and return the question and answer matches in document order.

    The two selectors are evaluated independently against the whole document.
    Differing lengths are left for the pairing step to reject.
    """
    evaluator = evaluator or SoupSelectorEvaluator()
    document = evaluator.parse(body)
    questions = evaluator.select(document, question_selector)
    answers = evaluator.select(document, answer_selector)
    logger.debug(
        "{!r} matched {} nodes, {!r} matched {} nodes",
        question_selector, len(questions), answer_selector, len(answers),
    )
    return questions, answers
