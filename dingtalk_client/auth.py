from __future__ import annotations

import logging

from dingtalk_client.apis import AccessTokenApi
from dingtalk_client.cache import AccessTokenCache

logger = logging.getLogger(__name__)


class AccessTokenManager:
    """Hands out the app-level access token, fetching it only on a cache miss."""

    def __init__(self, app_key: str, access_token_api: AccessTokenApi, cache: AccessTokenCache):
        self._app_key = app_key
        self._access_token_api = access_token_api
        self._cache = cache

    def get_access_token(self) -> str:
        cached = self._cache.get(self._app_key)
        if cached is not None:
            return cached

        # concurrent misses may each fetch; the last set wins
        result = self._access_token_api.fetch()
        self._cache.set(self._app_key, result.access_token, result.expire_in)
        logger.info("Refreshed DingTalk app access token, expires in %ss", result.expire_in)
        return result.access_token
