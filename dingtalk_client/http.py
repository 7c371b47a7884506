from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Callable, Generic, Mapping, Optional, Protocol, TypeVar

import requests

from dingtalk_client.config import AppSettings
from dingtalk_client.errors import ApiError, ResponseDecodeError

logger = logging.getLogger(__name__)

ACCESS_TOKEN_HEADER = "x-acs-dingtalk-access-token"

ResponseT = TypeVar("ResponseT")


class RequestPayload(Protocol):
    def to_payload(self) -> dict[str, Any]:
        ...


@dataclass(frozen=True)
class ApiRequest(Generic[ResponseT]):
    method: str
    url: str
    decode: Callable[[dict[str, Any]], ResponseT]
    query: Optional[Mapping[str, str]] = None
    body: Optional[RequestPayload] = None
    token: str = ""


@dataclass(frozen=True)
class ErrorEnvelope:
    """Error carried in a response body, in either the current or legacy form."""

    code: str
    message: str
    request_id: str
    legacy: bool = False

    @classmethod
    def parse(cls, payload: dict[str, Any]) -> Optional["ErrorEnvelope"]:
        """Return the envelope if ``payload`` describes an error, else None."""
        code = payload.get("code")
        if code not in (None, ""):
            return cls(
                code=str(code),
                message=str(payload.get("message") or ""),
                request_id=str(payload.get("requestId") or ""),
            )

        errcode = payload.get("errcode")
        if errcode not in (None, 0, "0", ""):
            return cls(
                code=str(errcode),
                message=str(payload.get("errmsg") or ""),
                request_id=str(payload.get("request_id") or ""),
                legacy=True,
            )

        return None

    def to_error(self) -> ApiError:
        return ApiError(self.code, self.message, self.request_id, legacy=self.legacy)


class HttpClient:
    def __init__(self, settings: AppSettings, session: requests.Session | None = None):
        self._settings = settings
        self._session = session if session is not None else requests.Session()

    def dispatch(self, request: ApiRequest[ResponseT]) -> ResponseT:
        headers: dict[str, str] = {"Accept": "application/json"}
        payload: dict[str, Any] | None = None
        if request.body is not None:
            payload = request.body.to_payload()
            headers["Content-Type"] = "application/json"
        if request.token:
            headers[ACCESS_TOKEN_HEADER] = request.token

        logger.debug("DingTalk request %s %s", request.method, request.url)
        response = self._session.request(
            request.method,
            request.url,
            params=dict(request.query) if request.query else None,
            json=payload,
            headers=headers,
            timeout=self._settings.timeout_seconds,
        )

        data = self._decode_body(response)

        envelope = ErrorEnvelope.parse(data)
        if envelope is not None:
            logger.warning(
                "DingTalk API error on %s %s: code=%s message=%s request_id=%s",
                request.method,
                request.url,
                envelope.code,
                envelope.message,
                envelope.request_id,
            )
            raise envelope.to_error()

        try:
            return request.decode(data)
        except (TypeError, ValueError) as exc:
            raise ResponseDecodeError(
                f"Unexpected response shape from {request.url}: {exc}"
            ) from exc

    @staticmethod
    def _decode_body(response: requests.Response) -> dict[str, Any]:
        content = response.content
        try:
            parsed = requests.models.complexjson.loads(content)
        except ValueError as exc:
            snippet = content[:200].decode("utf-8", errors="replace")
            raise ResponseDecodeError(
                f"HTTP {response.status_code}: response is not valid JSON: {snippet}"
            ) from exc

        if not isinstance(parsed, dict):
            raise ResponseDecodeError(
                f"HTTP {response.status_code}: expected a JSON object, got {type(parsed).__name__}"
            )
        return parsed
