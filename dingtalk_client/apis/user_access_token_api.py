from __future__ import annotations

from dingtalk_client.config import AppSettings
from dingtalk_client.http import ApiRequest, HttpClient
from dingtalk_client.models import UserAccessTokenRequest, UserAccessTokenResponse


class UserAccessTokenApi:
    path = "/v1.0/oauth2/userAccessToken"

    def __init__(self, settings: AppSettings, http_client: HttpClient):
        self._settings = settings
        self._http_client = http_client

    def exchange_code(self, auth_code: str) -> UserAccessTokenResponse:
        request = ApiRequest(
            method="POST",
            url=f"{self._settings.api_base_url}{self.path}",
            decode=UserAccessTokenResponse.from_payload,
            body=UserAccessTokenRequest(
                client_id=self._settings.app_key,
                client_secret=self._settings.app_secret,
                code=auth_code,
            ),
        )
        return self._http_client.dispatch(request)
