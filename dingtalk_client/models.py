from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _str(payload: dict[str, Any], key: str) -> str:
    value = payload.get(key)
    return "" if value is None else str(value)


def _int(payload: dict[str, Any], key: str) -> int:
    value = payload.get(key)
    if value is None or value == "":
        return 0
    return int(value)


@dataclass(frozen=True)
class UserAccessTokenRequest:
    client_id: str
    client_secret: str
    code: str
    grant_type: str = "authorization_code"

    def to_payload(self) -> dict[str, Any]:
        return {
            "clientId": self.client_id,
            "clientSecret": self.client_secret,
            "code": self.code,
            "grantType": self.grant_type,
        }


@dataclass(frozen=True)
class UserAccessTokenResponse:
    access_token: str
    refresh_token: str = ""
    expire_in: int = 0
    corp_id: str = ""

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "UserAccessTokenResponse":
        return cls(
            access_token=_str(payload, "accessToken"),
            refresh_token=_str(payload, "refreshToken"),
            expire_in=_int(payload, "expireIn"),
            corp_id=_str(payload, "corpId"),
        )


@dataclass(frozen=True)
class ContactUser:
    mobile: str
    nick: str = ""
    avatar_url: str = ""
    open_id: str = ""
    union_id: str = ""
    email: str = ""
    state_code: str = ""

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "ContactUser":
        return cls(
            mobile=_str(payload, "mobile"),
            nick=_str(payload, "nick"),
            avatar_url=_str(payload, "avatarUrl"),
            open_id=_str(payload, "openId"),
            union_id=_str(payload, "unionId"),
            email=_str(payload, "email"),
            state_code=_str(payload, "stateCode"),
        )


@dataclass(frozen=True)
class UserByMobileRequest:
    mobile: str

    def to_payload(self) -> dict[str, Any]:
        return {"mobile": self.mobile}


@dataclass(frozen=True)
class UserByMobileResult:
    userid: str = ""


@dataclass(frozen=True)
class UserByMobileResponse:
    errcode: int = 0
    errmsg: str = ""
    request_id: str = ""
    result: UserByMobileResult = field(default_factory=UserByMobileResult)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "UserByMobileResponse":
        result = payload.get("result")
        if not isinstance(result, dict):
            result = {}
        return cls(
            errcode=_int(payload, "errcode"),
            errmsg=_str(payload, "errmsg"),
            request_id=_str(payload, "request_id"),
            result=UserByMobileResult(userid=_str(result, "userid")),
        )


@dataclass(frozen=True)
class AccessTokenRequest:
    app_key: str
    app_secret: str

    def to_payload(self) -> dict[str, Any]:
        return {"appKey": self.app_key, "appSecret": self.app_secret}


@dataclass(frozen=True)
class AccessTokenResponse:
    access_token: str
    expire_in: int = 0

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "AccessTokenResponse":
        return cls(
            access_token=_str(payload, "accessToken"),
            expire_in=_int(payload, "expireIn"),
        )
