"""Configuration for orderpad.

Values come from environment variables; a ``.env`` file in the working
directory is loaded first so local overrides do not need exporting.
Only the composition root and the CLI read this module.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import load_dotenv

load_dotenv()


def _flag(value: str | None, default: bool) -> bool:
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Config:

    output_dir: Path = Path("pedidos")
    log_level: str = "WARNING"
    log_dir: Path = Path("logs")
    file_logging: bool = False
    share_enabled: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Config:
        env = os.environ if environ is None else environ
        return cls(
            output_dir=Path(env.get("ORDERPAD_OUTPUT_DIR", "pedidos")),
            log_level=env.get("ORDERPAD_LOG_LEVEL", "WARNING").upper(),
            log_dir=Path(env.get("ORDERPAD_LOG_DIR", "logs")),
            file_logging=_flag(env.get("ORDERPAD_FILE_LOGGING"), False),
            share_enabled=_flag(env.get("ORDERPAD_SHARE"), True),
        )
