"""JSON Document Storage — keyed JSON files under one root directory, serialized by a global lock.

Invariants:
    - One process-wide lock: at most one read/write/exists/delete in flight, across all keys
      and all JsonStorageService instances
    - The lock is held for a single file operation only, never across read-modify-write
    - Missing or blank file reads as None, never as an error
    - Every OSError and every parse failure is mapped to StorageError (core/errors.py)
    - The root directory is created lazily, once per service instance
    - storage_service singleton is set by init_storage() from the FastAPI lifespan

Design Decisions:
    - Blocking file IO runs in a worker thread (asyncio.to_thread): the event loop never
      waits on the lock
    - pydantic models as the document shape: parsing and camelCase serialization in one place
"""

import asyncio
import logging
import os
import threading
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from customer_images.core.errors import StorageError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

_file_lock = threading.Lock()

JSON_INDENT = 2


class JsonStorageService:
    """Reads and writes pydantic documents as indented JSON files."""

    def __init__(self, data_dir: str | os.PathLike = "data"):
        self.data_dir = Path(data_dir)
        self._root_ready = False

    def path_for(self, key: str) -> Path:
        file_name = key if key.endswith(".json") else f"{key}.json"
        return self.data_dir / file_name

    def _ensure_root(self) -> None:
        """Create the root directory on first use. Caller holds the lock."""
        if not self._root_ready:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            self._root_ready = True

    # ─── Public async API ──────────────────────────────────────────

    async def read(self, key: str, model: type[M]) -> M | None:
        return await asyncio.to_thread(self._read_sync, key, model)

    async def write(self, key: str, value: BaseModel) -> None:
        await asyncio.to_thread(self._write_sync, key, value)

    async def exists(self, key: str) -> bool:
        return await asyncio.to_thread(self._exists_sync, key)

    async def delete(self, key: str) -> None:
        await asyncio.to_thread(self._delete_sync, key)

    async def health_check(self) -> bool:
        """Readiness probe: root directory exists (or can be created) and is writable."""
        try:
            return await asyncio.to_thread(self._writable_sync)
        except StorageError as e:
            logger.error(f"Storage health check failed: {e}")
            return False

    # ─── Lock-guarded file operations ──────────────────────────────

    def _read_sync(self, key: str, model: type[M]) -> M | None:
        with _file_lock:
            try:
                self._ensure_root()
                path = self.path_for(key)
                if not path.exists():
                    logger.debug("Storage miss", extra={"storage_key": key})
                    return None
                content = path.read_text(encoding="utf-8")
            except UnicodeDecodeError as e:
                logger.error(f"Storage document is not UTF-8: {e}", extra={"storage_key": key})
                raise StorageError(key, "deserialize", e) from e
            except OSError as e:
                logger.error(f"Storage read failed: {e}", extra={"storage_key": key})
                raise StorageError(key, "read", e) from e

        if not content.strip():
            return None
        try:
            document = model.model_validate_json(content)
        except PydanticValidationError as e:
            logger.error(f"Storage document is malformed: {e}", extra={"storage_key": key})
            raise StorageError(key, "deserialize", e) from e
        logger.debug("Storage read", extra={"storage_key": key})
        return document

    def _write_sync(self, key: str, value: BaseModel) -> None:
        try:
            content = value.model_dump_json(indent=JSON_INDENT, by_alias=True)
        except (ValueError, TypeError) as e:
            raise StorageError(key, "serialize", e) from e

        with _file_lock:
            try:
                self._ensure_root()
                self.path_for(key).write_text(content, encoding="utf-8")
            except OSError as e:
                logger.error(f"Storage write failed: {e}", extra={"storage_key": key})
                raise StorageError(key, "write", e) from e
        logger.debug("Storage write", extra={"storage_key": key})

    def _exists_sync(self, key: str) -> bool:
        with _file_lock:
            try:
                self._ensure_root()
                return self.path_for(key).exists()
            except OSError as e:
                raise StorageError(key, "check", e) from e

    def _delete_sync(self, key: str) -> None:
        with _file_lock:
            try:
                self._ensure_root()
                self.path_for(key).unlink(missing_ok=True)
            except OSError as e:
                logger.error(f"Storage delete failed: {e}", extra={"storage_key": key})
                raise StorageError(key, "delete", e) from e
        logger.debug("Storage delete", extra={"storage_key": key})

    def _writable_sync(self) -> bool:
        with _file_lock:
            try:
                self._ensure_root()
            except OSError as e:
                raise StorageError(str(self.data_dir), "prepare", e) from e
            return os.access(self.data_dir, os.W_OK)


# Singleton (initialized on startup)
storage_service: JsonStorageService | None = None


def init_storage(data_dir: str | os.PathLike) -> JsonStorageService:
    global storage_service
    storage_service = JsonStorageService(data_dir)
    return storage_service
