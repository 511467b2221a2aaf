# pairer.py
from typing import List

from cards import Flashcard
from errors import CountMismatchError


def normalize(text):
    text = text.replace("\n", "")
    text = text.replace("\r\n", "")
    return text.strip()


def node_text(node):
    return node.get_text()


def pair(question_nodes, answer_nodes, text_of=node_text) -> List[Flashcard]:
    """Zip the two match lists index by index into flashcards.

    Both lists must be the same length; no prefix is paired on a mismatch.
    """
    if len(question_nodes) != len(answer_nodes):
        raise CountMismatchError(len(question_nodes), len(answer_nodes))
    return [
        Flashcard(question=normalize(text_of(q)), answer=normalize(text_of(a)))
        for q, a in zip(question_nodes, answer_nodes)
    ]
