"""Tests for cache-backed app access token acquisition."""

import pytest

from dingtalk_client.apis import AccessTokenApi
from dingtalk_client.auth import AccessTokenManager
from dingtalk_client.cache import AccessTokenCache
from dingtalk_client.errors import ApiError


@pytest.fixture
def cache(clock):
    return AccessTokenCache(clock=clock)


@pytest.fixture
def manager(settings, http_client, cache):
    return AccessTokenManager(settings.app_key, AccessTokenApi(settings, http_client), cache)


class TestAccessTokenManager:
    def test_cache_hit_makes_no_request(self, manager, cache, session):
        cache.set("app-key", "cached-tok", 100)

        assert manager.get_access_token() == "cached-tok"
        assert session.calls == []

    def test_cache_miss_fetches_once_and_stores(self, manager, cache, session, clock):
        session.queue({"accessToken": "fresh-tok", "expireIn": 7200})

        assert manager.get_access_token() == "fresh-tok"
        assert len(session.calls) == 1
        assert cache.get("app-key") == "fresh-tok"

        clock.advance(7199)
        assert cache.get("app-key") == "fresh-tok"
        clock.advance(1)
        assert cache.get("app-key") is None

    def test_second_call_served_from_cache(self, manager, session):
        session.queue({"accessToken": "fresh-tok", "expireIn": 7200})

        manager.get_access_token()
        manager.get_access_token()

        assert len(session.calls) == 1

    def test_refetches_after_expiry(self, manager, session, clock):
        session.queue({"accessToken": "tok-1", "expireIn": 60})
        session.queue({"accessToken": "tok-2", "expireIn": 60})

        assert manager.get_access_token() == "tok-1"
        clock.advance(61)
        assert manager.get_access_token() == "tok-2"
        assert len(session.calls) == 2

    def test_fetch_error_leaves_cache_empty(self, manager, cache, session):
        session.queue({"code": "InvalidAppKey", "message": "bad key", "requestId": "r9"})

        with pytest.raises(ApiError):
            manager.get_access_token()

        assert cache.get("app-key") is None
