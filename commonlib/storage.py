"""Shared storage helpers for the product catalog.

The catalog persists its collection as a single JSON array. Writes are atomic
(temp file, fsync, replace) and the previous contents are rotated into
``.bakN`` files before every rewrite. Unlike a cache, reads never guess: a
corrupt primary file is reported to the caller, and recovering from a backup
is an explicit step.
"""
from __future__ import annotations

import base64
import hashlib
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Sequence

from cryptography.fernet import Fernet, InvalidToken

logger = logging.getLogger(__name__)


class StoreError(RuntimeError):
    """Raised when a persistence operation fails."""

    message = "Storage failure"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"error": str(self)}


class DeserializationError(StoreError):
    """Raised when a backing file exists but cannot be decoded."""

    message = "Backing file is not a valid collection"

    def __init__(self, path: Path | str, reason: str | None = None) -> None:
        self.path = Path(path)
        self.reason = reason
        detail = f"{self.message}: {self.path.name}"
        if reason:
            detail = f"{detail} ({reason})"
        super().__init__(detail)


class ListStore:
    """JSON list store with atomic writes and rotating backups."""

    def __init__(self, path: Path | str, backups: int = 2) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.backups = max(0, backups)

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------
    def _encode(self, items: Sequence[Dict[str, Any]]) -> bytes:
        return json.dumps(list(items), indent=2).encode("utf-8")

    def _decode(self, path: Path, blob: bytes) -> Any:
        try:
            return json.loads(blob.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise DeserializationError(path, str(exc)) from exc

    # ------------------------------------------------------------------
    # Persistence helpers
    # ------------------------------------------------------------------
    def _backup_path(self, index: int) -> Path:
        return self.path.with_suffix(self.path.suffix + f".bak{index}")

    def _read_json(self, path: Path) -> List[Dict[str, Any]] | None:
        if not path.exists():
            return None
        try:
            blob = path.read_bytes()
        except OSError as exc:
            raise StoreError(str(exc)) from exc
        if not blob:
            return []
        data = self._decode(path, blob)
        if not isinstance(data, list):
            raise DeserializationError(path, f"expected a list, got {type(data).__name__}")
        if not all(isinstance(item, dict) for item in data):
            raise DeserializationError(path, "expected a list of objects")
        return data

    def _write_json(self, path: Path, data: Sequence[Dict[str, Any]]) -> None:
        payload = self._encode(data)
        tmp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with tmp_path.open("wb") as fh:
                fh.write(payload)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_path, path)
        except OSError as exc:
            raise StoreError(str(exc)) from exc
        finally:
            try:
                tmp_path.unlink(missing_ok=True)
            except OSError:
                logger.warning("Could not remove temporary file %s", tmp_path.name)

    def _rotate_backups(self) -> None:
        if self.backups <= 0:
            return
        for idx in range(self.backups, 0, -1):
            src = self.path if idx == 1 else self._backup_path(idx - 1)
            dest = self._backup_path(idx)
            if src.exists():
                try:
                    # The primary stays readable until the replacement lands.
                    dest.write_bytes(src.read_bytes())
                except OSError:
                    logger.warning("Could not rotate %s into %s", src.name, dest.name)
                    continue

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def load(self) -> List[Dict[str, Any]]:
        data = self._read_json(self.path)
        return [] if data is None else list(data)

    def save(self, items: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
        snapshot: List[Dict[str, Any]] = []
        for item in items:
            snapshot.append(dict(item))
        self._rotate_backups()
        self._write_json(self.path, snapshot)
        return snapshot

    def backup_paths(self) -> list[Path]:
        return [self._backup_path(idx) for idx in range(1, self.backups + 1)]

    def restore_backup(self) -> List[Dict[str, Any]]:
        """Overwrite the primary file with the newest readable backup."""

        for candidate in self.backup_paths():
            try:
                data = self._read_json(candidate)
            except DeserializationError:
                logger.warning("Skipping unreadable backup %s", candidate.name)
                continue
            if data is None:
                continue
            self._write_json(self.path, data)
            logger.warning("Recovered %s from backup %s", self.path.name, candidate.name)
            return list(data)
        raise DeserializationError(self.path, "no readable backup available")


def _derive_key(secret: str) -> bytes:
    digest = hashlib.sha256(secret.encode("utf-8")).digest()
    return base64.urlsafe_b64encode(digest)


class EncryptedListStore(ListStore):
    """List store that encrypts payloads using Fernet symmetric encryption."""

    def __init__(self, path: Path | str, secret: str, backups: int = 2) -> None:
        if not secret:
            raise ValueError("EncryptedListStore requires a non-empty secret")
        super().__init__(path, backups=backups)
        self._fernet = Fernet(_derive_key(secret))

    def _encode(self, items: Sequence[Dict[str, Any]]) -> bytes:  # type: ignore[override]
        return self._fernet.encrypt(super()._encode(items))

    def _decode(self, path: Path, blob: bytes) -> Any:  # type: ignore[override]
        try:
            decrypted = self._fernet.decrypt(blob)
        except InvalidToken as exc:
            raise DeserializationError(path, "invalid token or wrong secret") from exc
        return super()._decode(path, decrypted)
