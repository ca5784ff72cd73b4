# confusables_gen/config.py
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

CONFUSABLES_URL = "https://www.unicode.org/Public/security/revision-06/confusables.txt"
EXTRA_CONFUSABLES_FILE = "./extra_confusables.json"
OUTPUT_FILE = "./confusables_table.py"
PACKAGE_NAME = "confusables"


class GeneratorSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CONFUSABLES_GEN_", extra="ignore")

    # --- Sources ---
    confusables_url: str = Field(default=CONFUSABLES_URL)
    extra_confusables_file: str = Field(default=EXTRA_CONFUSABLES_FILE)

    # --- Output ---
    output_file: str = Field(default=OUTPUT_FILE)
    package_name: str = Field(default=PACKAGE_NAME)

    # --- Transport ---
    http_timeout_s: float = Field(default=30, gt=0)

    # --- Logging ---
    log_level: str = Field(default="INFO")


def get_settings() -> GeneratorSettings:
    return GeneratorSettings()
