"""Generation settings, configuration documents, and logging setup.

Settings are merged in this order, later sources winning:
defaults -> environment variables -> explicit arguments.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from kmpbindgen.config import DEFAULT_LOG_LEVEL, ENV_CDYLIB, ENV_LOG_LEVEL
from kmpbindgen.errors import ConfigParseError

logger = logging.getLogger(__name__)


class GenerationSettings(BaseModel):
    """Build-wide settings shared by every component."""

    out_dir: Path
    """Root of the Kotlin Multiplatform source tree to write into."""

    cdylib: str | None = None
    """Native library name applied to components without ``cdylib_name``."""


def load_settings(out_dir: str | Path, cdylib: str | None = None) -> GenerationSettings:
    """Build settings, reading the cdylib override from the environment if not given."""
    if cdylib is None:
        cdylib = os.environ.get(ENV_CDYLIB) or None
    return GenerationSettings(out_dir=Path(out_dir), cdylib=cdylib)


def load_config_document(path: str | Path) -> dict[str, Any]:
    """Read a TOML configuration document.

    A missing file is treated as an empty document, so every component
    falls back to its defaults.
    """
    path = Path(path)
    if not path.is_file():
        logger.debug("No configuration document at %s", path)
        return {}
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigParseError(f"Malformed configuration document {path}: {exc}") from exc


def configure_logging(level: str | None = None) -> None:
    """Configure root logging from *level* or ``KMPBINDGEN_LOG_LEVEL``."""
    level = (level or os.environ.get(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
