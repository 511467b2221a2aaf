# exporter.py
import csv
import json
import os

from loguru import logger

from errors import ExportError, UnsupportedFormatError

HEADER = ["Question", "Answer"]


def formats_for(path):
    # suffix checks are independent; each match runs its own export
    path = os.fspath(path)
    formats = []
    if path.endswith(".json"):
        formats.append("json")
    if path.endswith(".csv"):
        formats.append("csv")
    return formats


def _open_owner_only(path):
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    return os.fdopen(fd, "w", newline="", encoding="utf-8")


def export_json(cards, path):
    data = json.dumps([card.as_dict() for card in cards], ensure_ascii=False, indent=2)
    try:
        with _open_owner_only(path) as f:
            f.write(data)
    except OSError as e:
        raise ExportError(path, e) from e
    logger.debug("Wrote {} flashcards as JSON to {}", len(cards), path)


def export_csv(cards, path):
    """Write a Question,Answer header then one row per card.

    The first failing row stops the export; the file is closed either way.
    """
    try:
        with _open_owner_only(path) as f:
            w = csv.writer(f)
            w.writerow(HEADER)
            for card in cards:
                w.writerow([card.question, card.answer])
    except (OSError, csv.Error) as e:
        raise ExportError(path, e) from e
    logger.debug("Wrote {} flashcards as CSV to {}", len(cards), path)


EXPORTERS = {"json": export_json, "csv": export_csv}


def export(cards, path):
    formats = formats_for(path)
    if not formats:
        raise UnsupportedFormatError(path)
    for fmt in formats:
        EXPORTERS[fmt](cards, path)
