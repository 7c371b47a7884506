from .cache import AccessTokenCache, get_cache
from .config import AppSettings, ConfigurationError
from .errors import ApiError, DingtalkError, OrganizationMembershipError, ResponseDecodeError
from .http import ApiRequest, ErrorEnvelope, HttpClient
from .logging_utils import configure_logging
from .services import DingtalkLoginService, login

__all__ = [
    "AccessTokenCache",
    "ApiError",
    "ApiRequest",
    "AppSettings",
    "ConfigurationError",
    "DingtalkError",
    "DingtalkLoginService",
    "ErrorEnvelope",
    "HttpClient",
    "OrganizationMembershipError",
    "ResponseDecodeError",
    "configure_logging",
    "get_cache",
    "login",
]
