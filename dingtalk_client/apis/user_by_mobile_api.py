from __future__ import annotations

from dingtalk_client.config import AppSettings
from dingtalk_client.http import ApiRequest, HttpClient
from dingtalk_client.models import UserByMobileRequest, UserByMobileResponse


class UserByMobileApi:
    path = "/topapi/v2/user/getbymobile"

    def __init__(self, settings: AppSettings, http_client: HttpClient):
        self._settings = settings
        self._http_client = http_client

    def get_user_id(self, access_token: str, mobile: str) -> UserByMobileResponse:
        # legacy endpoint: token goes in the query string, not the header
        request = ApiRequest(
            method="POST",
            url=f"{self._settings.oapi_base_url}{self.path}",
            decode=UserByMobileResponse.from_payload,
            query={"access_token": access_token},
            body=UserByMobileRequest(mobile=mobile),
        )
        return self._http_client.dispatch(request)
