from __future__ import annotations

import logging

import requests

from dingtalk_client.apis import AccessTokenApi, ContactApi, UserAccessTokenApi, UserByMobileApi
from dingtalk_client.auth import AccessTokenManager
from dingtalk_client.cache import AccessTokenCache, get_cache
from dingtalk_client.config import AppSettings
from dingtalk_client.errors import OrganizationMembershipError
from dingtalk_client.http import HttpClient
from dingtalk_client.logging_utils import configure_logging

logger = logging.getLogger(__name__)


class DingtalkLoginService:
    def __init__(
        self,
        user_access_token_api: UserAccessTokenApi,
        contact_api: ContactApi,
        user_by_mobile_api: UserByMobileApi,
        access_token_manager: AccessTokenManager,
    ):
        self._user_access_token_api = user_access_token_api
        self._contact_api = contact_api
        self._user_by_mobile_api = user_by_mobile_api
        self._access_token_manager = access_token_manager

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings,
        http_client: HttpClient | None = None,
        cache: AccessTokenCache | None = None,
    ) -> "DingtalkLoginService":
        if http_client is None:
            http_client = HttpClient(settings)
        if cache is None:
            cache = get_cache()
        return cls(
            user_access_token_api=UserAccessTokenApi(settings, http_client),
            contact_api=ContactApi(settings, http_client),
            user_by_mobile_api=UserByMobileApi(settings, http_client),
            access_token_manager=AccessTokenManager(
                settings.app_key,
                AccessTokenApi(settings, http_client),
                cache,
            ),
        )

    def login(self, auth_code: str, redirect_uri: str = "") -> str:
        """
        Resolve a DingTalk authorization code to the user's mobile number.

        ``redirect_uri`` is accepted for signature compatibility and unused.
        Raises OrganizationMembershipError when the mobile number does not
        belong to a member of the application's organization.
        """
        user_token = self._user_access_token_api.exchange_code(auth_code)
        contact_user = self._contact_api.get_current_user(user_token.access_token)

        app_token = self._access_token_manager.get_access_token()
        by_mobile = self._user_by_mobile_api.get_user_id(app_token, contact_user.mobile)

        # unknown mobiles come back as success with an empty userid
        if not by_mobile.result.userid:
            logger.info("DingTalk login rejected: mobile is not an organization member")
            raise OrganizationMembershipError(
                "please scan the code again after joining the dingtalk company"
            )

        return contact_user.mobile


def login(auth_code: str, redirect_uri: str = "", settings: AppSettings | None = None) -> str:
    if settings is None:
        settings = AppSettings.from_env()
    configure_logging(settings.log_level)

    with requests.Session() as session:
        service = DingtalkLoginService.from_settings(
            settings,
            http_client=HttpClient(settings, session=session),
        )
        return service.login(auth_code, redirect_uri)
