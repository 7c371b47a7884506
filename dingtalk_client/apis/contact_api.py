from __future__ import annotations

from dingtalk_client.config import AppSettings
from dingtalk_client.http import ApiRequest, HttpClient
from dingtalk_client.models import ContactUser


class ContactApi:
    path = "/v1.0/contact/users/me"

    def __init__(self, settings: AppSettings, http_client: HttpClient):
        self._settings = settings
        self._http_client = http_client

    def get_current_user(self, user_access_token: str) -> ContactUser:
        request = ApiRequest(
            method="GET",
            url=f"{self._settings.api_base_url}{self.path}",
            decode=ContactUser.from_payload,
            token=user_access_token,
        )
        return self._http_client.dispatch(request)
