from __future__ import annotations

from dingtalk_client.config import AppSettings
from dingtalk_client.http import ApiRequest, HttpClient
from dingtalk_client.models import AccessTokenRequest, AccessTokenResponse


class AccessTokenApi:
    path = "/v1.0/oauth2/accessToken"

    def __init__(self, settings: AppSettings, http_client: HttpClient):
        self._settings = settings
        self._http_client = http_client

    def fetch(self) -> AccessTokenResponse:
        request = ApiRequest(
            method="POST",
            url=f"{self._settings.api_base_url}{self.path}",
            decode=AccessTokenResponse.from_payload,
            body=AccessTokenRequest(
                app_key=self._settings.app_key,
                app_secret=self._settings.app_secret,
            ),
        )
        return self._http_client.dispatch(request)
