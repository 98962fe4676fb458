"""Async key-value storage backends for the persisted locale."""

import asyncio
import json
import logging
from pathlib import Path
from typing import Protocol

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from intlkit.config import settings

_log = logging.getLogger(__name__)


class StorageError(RuntimeError):
    """Raised when a storage backend fails to read or write a value."""


class LocaleStorage(Protocol):
    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...


class MemoryStorage:
    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value


class FileStorage:
    """Store values in a JSON object on disk."""

    def __init__(self, path: str | Path = ""):
        self.path = Path(path or settings.intl_storage_path)

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not contain a JSON object")
        return data

    def _write(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        tmp.replace(self.path)

    async def get(self, key: str) -> str | None:
        try:
            data = await asyncio.to_thread(self._read)
        except (OSError, ValueError) as exc:
            raise StorageError(f"Failed to read {self.path}") from exc
        value = data.get(key)
        return value if isinstance(value, str) else None

    async def set(self, key: str, value: str) -> None:
        try:
            await asyncio.to_thread(self._write, key, value)
        except (OSError, ValueError) as exc:
            raise StorageError(f"Failed to write {self.path}") from exc


class RedisStorage:
    def __init__(self, url: str = "", prefix: str = ""):
        self.prefix = prefix or f"{settings.app_name}:"
        self._client = aioredis.from_url(url or settings.redis_url, decode_responses=True)

    async def get(self, key: str) -> str | None:
        try:
            return await self._client.get(self.prefix + key)
        except RedisError as exc:
            raise StorageError(f"Failed to read {key!r} from redis") from exc

    async def set(self, key: str, value: str) -> None:
        try:
            await self._client.set(self.prefix + key, value)
        except RedisError as exc:
            raise StorageError(f"Failed to write {key!r} to redis") from exc

    async def close(self) -> None:
        await self._client.aclose()


def build_storage(backend: str = "") -> LocaleStorage:
    """Create the storage backend named by ``backend`` or the settings."""
    backend = backend or settings.intl_storage_backend
    if backend == "memory":
        return MemoryStorage()
    if backend == "file":
        return FileStorage()
    if backend == "redis":
        return RedisStorage()
    raise ValueError(f"Unknown storage backend: {backend}")
