# settings.py
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from url2anki import DEFAULT_OUTPUT_FILE


class Url2AnkiSettings(BaseSettings):
    """Defaults for every CLI flag, read from URL2ANKI_* variables and ./.env."""

    model_config = SettingsConfigDict(env_prefix="URL2ANKI_", env_file=".env", extra="ignore")

    url: Optional[str] = None
    question_selector: Optional[str] = None
    answer_selector: Optional[str] = None
    output_file: str = DEFAULT_OUTPUT_FILE
    preview: bool = False
    debug: bool = False
