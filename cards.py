# cards.py
from dataclasses import dataclass


@dataclass(frozen=True)
class Flashcard:
    question: str
    answer: str

    def as_dict(self):
        # key order is the export order
        return {"question": self.question, "answer": self.answer}
