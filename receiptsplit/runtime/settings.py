"""Runtime settings loaded from an optional TOML file.

Lookup order for the config file:
1. explicit ``config_path`` argument
2. ``RECEIPTSPLIT_CONFIG`` environment variable
3. ``receiptsplit.toml`` in the current working directory

Example file::

    [parser]
    seed_placeholders = false
    extra_noise_keywords = ["happy hour"]

    [ocr]
    url = "http://localhost:8001"
    timeout = 60

    [display]
    currency_symbol = "₼"
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

from receiptsplit.runtime.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_FILENAME = "receiptsplit.toml"
DEFAULT_OCR_URL = "http://localhost:8001"
DEFAULT_OCR_TIMEOUT = 60.0
DEFAULT_CURRENCY_SYMBOL = "₼"


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings."""

    ocr_url: str = DEFAULT_OCR_URL
    ocr_timeout: float = DEFAULT_OCR_TIMEOUT
    seed_placeholders: bool = True
    extra_noise_keywords: tuple[str, ...] = ()
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    source: Path | None = None


def _section(config: dict[str, Any], name: str) -> dict[str, Any]:
    value = config.get(name, {})
    return value if isinstance(value, dict) else {}


def _resolve_config_path(config_path: str | None) -> tuple[Path, bool]:
    """Return (path, explicit) where explicit means the caller asked for it."""
    if config_path is not None:
        return Path(config_path), True
    env_path = os.environ.get("RECEIPTSPLIT_CONFIG", "").strip()
    if env_path:
        return Path(env_path), True
    return Path.cwd() / DEFAULT_CONFIG_FILENAME, False


@lru_cache(maxsize=4)
def load_settings(config_path: str | None = None) -> Settings:
    """
    Load settings from TOML, falling back to defaults for anything missing.

    Raises:
        FileNotFoundError: an explicitly configured file does not exist.
    """
    path, explicit = _resolve_config_path(config_path)
    config: dict[str, Any] = {}
    source: Path | None = None

    if path.exists():
        with open(path, "rb") as f:
            config = tomllib.load(f)
        source = path
        logger.debug("Loaded settings from %s", path)
    elif explicit:
        raise FileNotFoundError(f"Settings file not found: {path}")

    parser_cfg = _section(config, "parser")
    ocr_cfg = _section(config, "ocr")
    display_cfg = _section(config, "display")

    keywords = tuple(
        str(keyword).strip().lower() for keyword in parser_cfg.get("extra_noise_keywords", []) if str(keyword).strip()
    )

    ocr_url = os.environ.get("RECEIPTSPLIT_OCR_URL", "").strip() or str(ocr_cfg.get("url", DEFAULT_OCR_URL))

    return Settings(
        ocr_url=ocr_url,
        ocr_timeout=float(ocr_cfg.get("timeout", DEFAULT_OCR_TIMEOUT)),
        seed_placeholders=bool(parser_cfg.get("seed_placeholders", True)),
        extra_noise_keywords=keywords,
        currency_symbol=str(display_cfg.get("currency_symbol", DEFAULT_CURRENCY_SYMBOL)),
        source=source,
    )
