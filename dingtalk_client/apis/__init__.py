from .access_token_api import AccessTokenApi
from .contact_api import ContactApi
from .user_access_token_api import UserAccessTokenApi
from .user_by_mobile_api import UserByMobileApi

__all__ = ["AccessTokenApi", "ContactApi", "UserAccessTokenApi", "UserByMobileApi"]
