"""Runtime settings read from the environment.

``load_dotenv`` runs inside :meth:`Settings.from_env` so a ``.env`` file in
the working directory is honoured without exporting anything.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum

from dotenv import load_dotenv

from .errors import ConfigError
from .result import Err, Ok, Result

DEFAULT_CATALOG_PATH = "database.txt"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


class TransferStrategy(Enum):
    RECURSIVE = "recursive"
    ITERATIVE = "iterative"


@dataclass(frozen=True)
class Settings:
    catalog_path: str = DEFAULT_CATALOG_PATH
    trace: bool = False
    transfer_strategy: TransferStrategy = TransferStrategy.RECURSIVE
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> Result["Settings", ConfigError]:
        """Build settings from ``BOOKSTACK_*`` variables (and ``.env``)."""
        load_dotenv()

        raw_strategy = os.getenv("BOOKSTACK_TRANSFER_STRATEGY", "recursive").strip().lower()
        try:
            strategy = TransferStrategy(raw_strategy)
        except ValueError:
            choices = ", ".join(s.value for s in TransferStrategy)
            return Err(
                ConfigError(
                    f"BOOKSTACK_TRANSFER_STRATEGY={raw_strategy!r} is not one of: {choices}"
                )
            )

        log_level = os.getenv("BOOKSTACK_LOG_LEVEL", "WARNING").strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            return Err(ConfigError(f"BOOKSTACK_LOG_LEVEL={log_level!r} is not a logging level"))

        return Ok(
            cls(
                catalog_path=os.getenv("BOOKSTACK_CATALOG", DEFAULT_CATALOG_PATH),
                trace=os.getenv("BOOKSTACK_TRACE", "").strip().lower() in _TRUTHY,
                transfer_strategy=strategy,
                log_level=log_level,
            )
        )
