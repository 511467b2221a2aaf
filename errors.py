# errors.py
"""Error types raised by the url2anki pipeline stages."""


class Url2AnkiError(Exception):
    """Base class for every error the pipeline reports to its caller."""


class FetchError(Url2AnkiError):
    """Raised when the page cannot be fetched."""

    def __init__(self, url, reason):
        self.url = url
        super().__init__(f"Failed to fetch {url}: {reason}")


class TransportError(FetchError):
    """DNS, TLS or connection failure before any HTTP status was received."""


class BadStatusError(FetchError):
    """The server answered with anything other than 200."""

    def __init__(self, url, status_code):
        self.status_code = status_code
        super().__init__(url, f"unexpected HTTP status {status_code}")


class ParseError(Url2AnkiError):
    """Raised when the response body cannot be read as an HTML document."""

    def __init__(self, reason):
        super().__init__(f"Failed to parse the page: {reason}")


class CountMismatchError(Url2AnkiError):
    def __init__(self, question_count, answer_count):
        self.question_count = question_count
        self.answer_count = answer_count
        super().__init__(
            "the number of questions and answers do not match: "
            f"{question_count} questions, {answer_count} answers"
        )


class ExportError(Url2AnkiError):
    """Raised when the flashcards cannot be written to the output file."""

    def __init__(self, path, reason):
        self.path = path
        super().__init__(f"Failed to export flashcards to {path}: {reason}")


class UnsupportedFormatError(ExportError):
    def __init__(self, path):
        super().__init__(path, "output file must end in .json or .csv")


class PreviewReadError(Url2AnkiError):
    """Standard input could not be read while waiting for confirmation."""

    def __init__(self, reason):
        super().__init__(f"Failed to read confirmation: {reason}")
