"""Configuration helpers for the product catalog.

Values come from the process environment, optionally primed from a ``.env``
file next to the data directory, so scripts and tests can point the catalog
at a different file without touching the store itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping
import logging
import os

from dotenv import load_dotenv


@dataclass(frozen=True)
class StoreConfig:
    """Strongly typed configuration for the product store."""

    base_dir: Path
    product_file: Path
    backups: int
    secret: str
    log_level: str

    @property
    def encrypted(self) -> bool:
        return bool(self.secret)


def _coerce_backups(raw: str) -> int:
    try:
        value = int(str(raw).strip())
    except ValueError as exc:
        raise ValueError(f"PRODUCT_BACKUPS must be an integer, got {raw!r}") from exc
    return max(0, value)


def _coerce_log_level(raw: str) -> str:
    level = str(raw).strip().upper() or "INFO"
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"LOG_LEVEL must be a logging level name, got {raw!r}")
    return level


def _resolve_path(base_dir: Path, raw: str | None) -> Path:
    if not raw or not raw.strip():
        return base_dir / "products.json"
    path = Path(raw.strip()).expanduser()
    return path if path.is_absolute() else base_dir / path


def load_store_config(base_dir: Path | str, env: Mapping[str, str] | None = None) -> StoreConfig:
    """Load store configuration from the given base directory and env mapping."""

    base_dir = Path(base_dir)
    load_dotenv(base_dir / ".env")
    env_map = dict(os.environ if env is None else env)

    return StoreConfig(
        base_dir=base_dir,
        product_file=_resolve_path(base_dir, env_map.get("PRODUCT_FILE")),
        backups=_coerce_backups(env_map.get("PRODUCT_BACKUPS", "2")),
        secret=env_map.get("PRODUCT_SECRET", "").strip(),
        log_level=_coerce_log_level(env_map.get("LOG_LEVEL", "INFO")),
    )
