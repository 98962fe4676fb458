"""Tests for the persisted-locale storage backends."""

import json
from unittest.mock import AsyncMock, patch

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from intlkit.services.storage import (
    FileStorage,
    MemoryStorage,
    RedisStorage,
    StorageError,
    build_storage,
)


class TestMemoryStorage:
    @pytest.mark.asyncio
    async def test_get_missing(self):
        assert await MemoryStorage().get("locale") is None

    @pytest.mark.asyncio
    async def test_set_then_get(self):
        storage = MemoryStorage()
        await storage.set("locale", "en-US")
        assert await storage.get("locale") == "en-US"

    @pytest.mark.asyncio
    async def test_initial_values_are_copied(self):
        initial = {"locale": "en-US"}
        storage = MemoryStorage(initial)
        await storage.set("locale", "zh-CN")
        assert initial == {"locale": "en-US"}


class TestFileStorage:
    @pytest.mark.asyncio
    async def test_missing_file_reads_none(self, tmp_path):
        storage = FileStorage(tmp_path / "state" / "locale.json")
        assert await storage.get("locale") is None

    @pytest.mark.asyncio
    async def test_set_creates_file(self, tmp_path):
        path = tmp_path / "state" / "locale.json"
        storage = FileStorage(path)
        await storage.set("locale", "en-US")
        assert json.loads(path.read_text(encoding="utf-8")) == {"locale": "en-US"}
        assert await storage.get("locale") == "en-US"

    @pytest.mark.asyncio
    async def test_set_keeps_other_keys(self, tmp_path):
        path = tmp_path / "locale.json"
        path.write_text(json.dumps({"theme": "dark"}), encoding="utf-8")
        storage = FileStorage(path)
        await storage.set("locale", "zh-CN")
        assert json.loads(path.read_text(encoding="utf-8")) == {
            "theme": "dark",
            "locale": "zh-CN",
        }

    @pytest.mark.asyncio
    async def test_non_string_value_reads_none(self, tmp_path):
        path = tmp_path / "locale.json"
        path.write_text(json.dumps({"locale": 5}), encoding="utf-8")
        assert await FileStorage(path).get("locale") is None

    @pytest.mark.asyncio
    async def test_corrupt_file_raises_storage_error(self, tmp_path):
        path = tmp_path / "locale.json"
        path.write_text("{broken", encoding="utf-8")
        with pytest.raises(StorageError):
            await FileStorage(path).get("locale")

    @pytest.mark.asyncio
    async def test_non_object_file_raises_storage_error(self, tmp_path):
        path = tmp_path / "locale.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(StorageError):
            await FileStorage(path).set("locale", "en-US")

    @pytest.mark.asyncio
    async def test_unwritable_location_raises_storage_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(StorageError):
            await FileStorage(blocker / "locale.json").set("locale", "en-US")

    def test_default_path_from_settings(self):
        with patch("intlkit.services.storage.settings") as mock_settings:
            mock_settings.intl_storage_path = "./custom/locale.json"
            assert str(FileStorage().path) == "custom/locale.json"


class TestRedisStorage:
    def _storage(self, client):
        with patch("intlkit.services.storage.aioredis.from_url", return_value=client):
            return RedisStorage(url="redis://test:6379/0", prefix="app:")

    @pytest.mark.asyncio
    async def test_get_uses_prefix(self):
        client = AsyncMock()
        client.get.return_value = "en-US"
        storage = self._storage(client)
        assert await storage.get("locale") == "en-US"
        client.get.assert_awaited_once_with("app:locale")

    @pytest.mark.asyncio
    async def test_set_uses_prefix(self):
        client = AsyncMock()
        storage = self._storage(client)
        await storage.set("locale", "zh-CN")
        client.set.assert_awaited_once_with("app:locale", "zh-CN")

    @pytest.mark.asyncio
    async def test_get_error_raises_storage_error(self):
        client = AsyncMock()
        client.get.side_effect = RedisConnectionError("down")
        storage = self._storage(client)
        with pytest.raises(StorageError):
            await storage.get("locale")

    @pytest.mark.asyncio
    async def test_set_error_raises_storage_error(self):
        client = AsyncMock()
        client.set.side_effect = RedisConnectionError("down")
        storage = self._storage(client)
        with pytest.raises(StorageError):
            await storage.set("locale", "en-US")

    @pytest.mark.asyncio
    async def test_close(self):
        client = AsyncMock()
        storage = self._storage(client)
        await storage.close()
        client.aclose.assert_awaited_once()

    def test_client_created_from_url(self):
        with patch("intlkit.services.storage.aioredis.from_url") as mock_from_url:
            RedisStorage(url="redis://cache:6379/1")
        mock_from_url.assert_called_once_with("redis://cache:6379/1", decode_responses=True)


class TestBuildStorage:
    def test_memory(self):
        assert isinstance(build_storage("memory"), MemoryStorage)

    def test_file(self):
        assert isinstance(build_storage("file"), FileStorage)

    def test_redis(self):
        with patch("intlkit.services.storage.aioredis.from_url"):
            assert isinstance(build_storage("redis"), RedisStorage)

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="Unknown storage backend"):
            build_storage("s3")

    def test_backend_from_settings(self):
        with patch("intlkit.services.storage.settings") as mock_settings:
            mock_settings.intl_storage_backend = "memory"
            assert isinstance(build_storage(), MemoryStorage)
