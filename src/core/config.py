"""Runtime settings and logging setup"""

import logging
import os
from dataclasses import dataclass
from typing import Self

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
ROOT_LOGGER_NAME = "src"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    default_ascending: bool = True

    @classmethod
    def from_env(cls) -> Self:
        """Read TICTACTOE_* environment variables, falling back to the defaults above."""
        log_level = os.environ.get("TICTACTOE_LOG_LEVEL", cls.log_level).upper()
        if log_level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {log_level!r}")

        raw_ascending = os.environ.get("TICTACTOE_DEFAULT_ASCENDING")
        if raw_ascending is None:
            default_ascending = cls.default_ascending
        elif raw_ascending.lower() in _TRUTHY:
            default_ascending = True
        elif raw_ascending.lower() in _FALSY:
            default_ascending = False
        else:
            raise ValueError(
                f"Cannot interpret TICTACTOE_DEFAULT_ASCENDING={raw_ascending!r} as a boolean."
            )

        return cls(log_level=log_level, default_ascending=default_ascending)


def configure_logging(level: str = Settings.log_level) -> logging.Logger:
    """Attach a single stream handler to the project's root logger. Calling it again only updates the level."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    if not any(getattr(h, "_tictactoe_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._tictactoe_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger
