"""Common helpers shared by the catalog package."""

from .storage import (  # noqa: F401
    DeserializationError,
    EncryptedListStore,
    ListStore,
    StoreError,
)
from .result import Result
from .config import StoreConfig, load_store_config

__all__ = [
    "DeserializationError",
    "EncryptedListStore",
    "ListStore",
    "StoreError",
    "Result",
    "StoreConfig",
    "load_store_config",
]
