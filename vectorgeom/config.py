"""Configuration for the geometry model.

This module centralizes the logging setup and the loading of environment
variables from ``.env`` files. Importing it has no side effects: callers
decide when to read the environment and when to configure logging.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

ENV_FILE = os.getenv("VECTORGEOM_ENV_FILE", ".env")
LOG_LEVEL_ENV = "VECTORGEOM_LOG_LEVEL"
LOG_FORMAT_ENV = "VECTORGEOM_LOG_FORMAT"
REJECT_REPEATED_POINTS_ENV = "VECTORGEOM_REJECT_REPEATED_POINTS"
SIMPLICITY_BACKEND_ENV = "VECTORGEOM_SIMPLICITY_BACKEND"
SIMPLICITY_BACKENDS = ("shapely", "bruteforce")
_DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_TRUE_VALUES = {"1", "true", "yes", "on"}


def load_environment(path: os.PathLike[str] | str = ENV_FILE, *, override: bool = False) -> dict[str, str]:
    """Load environment variables from a ``.env`` file.

    Each line must follow the ``KEY=value`` format. Blank lines and comments
    starting with ``#`` are ignored.

    Args:
        path: Path to the ``.env`` file.
        override: When ``True`` replaces variables already present in
            ``os.environ``.

    Returns:
        A dictionary with the variables read from the file.
    """

    env_path = Path(path)
    if not env_path.exists():
        return {}

    loaded: dict[str, str] = {}

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip("\"'")

        if not key:
            continue

        if override or key not in os.environ:
            os.environ[key] = value

        loaded[key] = value

    return loaded


def _resolve_log_level(level: str | int) -> int:
    if isinstance(level, int):
        return level

    level_name = level.upper()
    return getattr(logging, level_name, logging.INFO)


def configure_logging(level: str | int | None = None, fmt: str | None = None) -> None:
    """Configure application logging.

    Args:
        level: Logging level (``INFO``, ``DEBUG``, etc.). When ``None`` the
            value of ``VECTORGEOM_LOG_LEVEL`` is used, falling back to
            ``INFO``.
        fmt: Log record format. When ``None`` uses ``VECTORGEOM_LOG_FORMAT``
            or the default format.
    """

    level_value = _resolve_log_level(level or os.getenv(LOG_LEVEL_ENV, "INFO"))
    fmt_value = fmt or os.getenv(LOG_FORMAT_ENV, _DEFAULT_LOG_FORMAT)

    root_logger = logging.getLogger()

    if root_logger.handlers:
        root_logger.setLevel(level_value)
        for handler in root_logger.handlers:
            handler.setLevel(level_value)
            handler.setFormatter(logging.Formatter(fmt_value))
        return

    logging.basicConfig(level=level_value, format=fmt_value)


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE_VALUES


@dataclass(slots=True)
class GeometrySettings:
    """Construction policy shared by the geometries of a factory."""

    reject_repeated_points: bool = False
    simplicity_backend: str = "shapely"

    def __post_init__(self) -> None:
        backend = self.simplicity_backend.strip().lower()
        if backend not in SIMPLICITY_BACKENDS:
            raise ValueError(
                f"Unknown simplicity backend {self.simplicity_backend!r} "
                f"(expected one of {', '.join(SIMPLICITY_BACKENDS)})"
            )
        self.simplicity_backend = backend

    @classmethod
    def from_env(cls) -> "GeometrySettings":
        return cls(
            reject_repeated_points=_env_flag(REJECT_REPEATED_POINTS_ENV),
            simplicity_backend=os.getenv(SIMPLICITY_BACKEND_ENV, "shapely"),
        )


__all__ = [
    "ENV_FILE",
    "GeometrySettings",
    "configure_logging",
    "load_environment",
]
