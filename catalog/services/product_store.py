"""Helpers for managing the product catalog JSON store."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import wraps
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, TypeVar

import pydantic

from commonlib.config import StoreConfig
from commonlib.result import Result
from commonlib.storage import EncryptedListStore, ListStore, StoreError

from ..errors import DuplicateCodeError, ImmutableFieldError, NotFoundError, ValidationError
from ..models import ProductModel, ProductUpdateModel

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _as_result(fn: Callable[..., T]) -> Callable[..., Result[T]]:
    """Convert store errors raised by ``fn`` into a failed ``Result``."""

    @wraps(fn)
    def wrapper(*args, **kwargs) -> Result[T]:
        try:
            return Result.success(fn(*args, **kwargs))
        except StoreError as exc:
            logger.warning("%s rejected: %s", fn.__name__, exc)
            return Result.failure(exc)

    return wrapper


def _validation_error(err: pydantic.ValidationError) -> ValidationError:
    details = err.errors(include_url=False, include_context=False, include_input=False)
    summary = "; ".join(
        f"{'.'.join(str(part) for part in e['loc']) or 'payload'}: {e['msg']}" for e in details
    )
    return ValidationError(f"Invalid product: {summary}", details=details)


def _next_id(items: list[dict]) -> int:
    ids = [
        item.get("id")
        for item in items
        if isinstance(item.get("id"), int) and not isinstance(item.get("id"), bool)
    ]
    return max(ids, default=0) + 1


def _find_index(items: list[dict], product_id: Any) -> Optional[int]:
    for idx, item in enumerate(items):
        if item.get("id") == product_id:
            return idx
    return None


@dataclass(slots=True)
class ProductCatalog:
    """High-level operations for the product JSON store.

    Every call re-reads the backing file; mutations rewrite it in full. The
    operations never raise store errors: they return a :class:`Result` whose
    ``error`` is one of the exceptions from :mod:`catalog.errors`.
    """

    path: str | Path
    backups: int = 2
    secret: str = ""
    _store: ListStore = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.secret:
            self._store = EncryptedListStore(self.path, self.secret, backups=self.backups)
        else:
            self._store = ListStore(self.path, backups=self.backups)

    @classmethod
    def from_config(cls, config: StoreConfig) -> "ProductCatalog":
        logger.debug(
            "Opening %s catalog at %s",
            "encrypted" if config.encrypted else "plain",
            config.product_file,
        )
        return cls(
            config.product_file,
            backups=config.backups,
            secret=config.secret if config.encrypted else "",
        )

    # ------------------------------------------------------------------
    # Basic CRUD operations
    # ------------------------------------------------------------------
    @_as_result
    def all(self) -> list[dict]:
        return self._store.load()

    @_as_result
    def create(
        self,
        title: str,
        description: str,
        price: int | float,
        thumbnail: str,
        code: str,
        stock: int,
    ) -> dict:
        items = self._store.load()
        try:
            product = ProductModel(
                title=title,
                description=description,
                price=price,
                thumbnail=thumbnail,
                code=code,
                stock=stock,
            )
        except pydantic.ValidationError as err:
            raise _validation_error(err) from err

        if any(item.get("code") == product.code for item in items):
            raise DuplicateCodeError(product.code)

        record = product.to_record(_next_id(items))
        items.append(record)
        self._store.save(items)
        logger.info("Created product %s (code %s)", record["id"], record["code"])
        return dict(record)

    @_as_result
    def get(self, product_id: int) -> dict:
        items = self._store.load()
        idx = _find_index(items, product_id)
        if idx is None:
            raise NotFoundError(product_id)
        return items[idx]

    @_as_result
    def update(self, product_id: int, fields: Mapping[str, Any]) -> dict:
        items = self._store.load()
        idx = _find_index(items, product_id)
        if idx is None:
            raise NotFoundError(product_id)
        current = items[idx]

        changes: Dict[str, Any] = dict(fields)
        if "id" in changes:
            if changes.pop("id") != current.get("id"):
                raise ImmutableFieldError("id")

        try:
            overlay = ProductUpdateModel.model_validate(changes).overlay()
        except pydantic.ValidationError as err:
            raise _validation_error(err) from err

        if "code" in overlay:
            if overlay.pop("code") != current.get("code"):
                raise ImmutableFieldError("code")

        updated = dict(current)
        for name, value in overlay.items():
            updated[name] = value
        items[idx] = updated
        self._store.save(items)
        logger.info("Updated product %s: %s", product_id, ", ".join(sorted(overlay)) or "no changes")
        return dict(updated)

    @_as_result
    def delete(self, product_id: int) -> bool:
        items = self._store.load()
        filtered = [item for item in items if item.get("id") != product_id]
        self._store.save(filtered)
        removed = len(filtered) != len(items)
        if removed:
            logger.info("Deleted product %s", product_id)
        return removed

    # ------------------------------------------------------------------
    # Recovery
    # ------------------------------------------------------------------
    @_as_result
    def restore_backup(self) -> list[dict]:
        return self._store.restore_backup()
