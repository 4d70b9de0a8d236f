"""Environment-driven settings for PhishCheck."""

from __future__ import annotations

import logging
import os
from typing import Optional


API_KEY_NAME = "X-API-KEY"
API_KEY = os.getenv("PHISHCHECK_API_KEY", "change-me")

LOG_LEVEL = os.getenv("PHISHCHECK_LOG_LEVEL", "INFO")


def get_seed() -> Optional[int]:
    raw = os.getenv("PHISHCHECK_SEED")
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"PHISHCHECK_SEED must be an integer, got {raw!r}") from None


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
