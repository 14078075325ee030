"""
config.py — Runtime settings from the environment (and an optional .env).

Environment variables:
    ATLAS_THEME        default theme key          (cyberpunk)
    ATLAS_SEED         default seed               (hackathon)
    ATLAS_OUTPUT_DIR   output directory           (./design-system)
    ATLAS_FORMATS      comma-separated formats    (css,json)
    ATLAS_LOG_LEVEL    logging level name         (WARNING)

CLI flags always win over these.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv

DEFAULT_THEME = "cyberpunk"
DEFAULT_SEED = "hackathon"
DEFAULT_OUTPUT_DIR = "./design-system"
DEFAULT_FORMATS = ["css", "json"]
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class Settings:
    theme: str = DEFAULT_THEME
    seed: str = DEFAULT_SEED
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    formats: List[str] = field(default_factory=lambda: list(DEFAULT_FORMATS))
    log_level: str = DEFAULT_LOG_LEVEL


def _split_formats(raw: str) -> List[str]:
    return [f.strip().lower() for f in raw.split(",") if f.strip()]


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """
    Read settings from the environment.

    ``env_file`` (or the nearest .env above the working directory) is loaded
    first; variables already set in the environment win.
    """
    load_dotenv(env_file or find_dotenv(usecwd=True))

    formats = _split_formats(os.environ.get("ATLAS_FORMATS", "")) or list(DEFAULT_FORMATS)
    return Settings(
        theme=os.environ.get("ATLAS_THEME") or DEFAULT_THEME,
        seed=os.environ.get("ATLAS_SEED") or DEFAULT_SEED,
        output_dir=Path(os.environ.get("ATLAS_OUTPUT_DIR") or DEFAULT_OUTPUT_DIR),
        formats=formats,
        log_level=(os.environ.get("ATLAS_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
    )
