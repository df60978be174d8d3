"""Tests for cache service."""

from unittest.mock import MagicMock, patch

import redis

from portfolio_cms.integrations.cache import NullCacheService, RedisCacheService, create_cache_service


class TestNullCacheService:
    def test_get_returns_none(self):
        cache = NullCacheService()
        assert cache.get("any_key") is None

    def test_set_does_nothing(self):
        cache = NullCacheService()
        cache.set("key", "value", 60)  # Should not raise

    def test_delete_does_nothing(self):
        NullCacheService().delete("key")

    def test_get_json_returns_none(self):
        cache = NullCacheService()
        assert cache.get_json("any_key") is None

    def test_set_json_does_nothing(self):
        cache = NullCacheService()
        cache.set_json("key", {"data": "test"}, 60)  # Should not raise


class TestRedisCacheService:
    def _service(self):
        fake = MagicMock()
        with patch("portfolio_cms.integrations.cache.redis.from_url", return_value=fake):
            service = RedisCacheService("redis://localhost:6379/0")
        return service, fake

    def test_json_round_trip_uses_setex(self):
        service, fake = self._service()
        service.set_json("k", {"items": [1]}, 300)
        fake.setex.assert_called_once_with("k", 300, '{"items": [1]}')

        fake.get.return_value = '{"items": [1]}'
        assert service.get_json("k") == {"items": [1]}

    def test_corrupt_json_is_a_miss(self):
        service, fake = self._service()
        fake.get.return_value = "{broken"
        assert service.get_json("k") is None

    def test_redis_errors_are_misses(self):
        service, fake = self._service()
        fake.get.side_effect = redis.ConnectionError("down")
        fake.delete.side_effect = redis.ConnectionError("down")
        assert service.get("k") is None
        service.delete("k")


class TestCreateCacheService:
    def test_no_url_gives_null_cache(self):
        with patch("portfolio_cms.integrations.cache.settings") as mock_settings:
            mock_settings.redis_url = ""
            assert isinstance(create_cache_service(), NullCacheService)

    def test_unreachable_redis_gives_null_cache(self):
        fake = MagicMock()
        fake.ping.side_effect = redis.ConnectionError("refused")
        with (
            patch("portfolio_cms.integrations.cache.settings") as mock_settings,
            patch("portfolio_cms.integrations.cache.redis.from_url", return_value=fake),
        ):
            mock_settings.redis_url = "redis://nowhere:6379/0"
            assert isinstance(create_cache_service(), NullCacheService)
