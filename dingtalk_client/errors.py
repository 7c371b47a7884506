from __future__ import annotations


class DingtalkError(RuntimeError):
    pass


class ApiError(DingtalkError):
    def __init__(self, code: str, message: str, request_id: str, legacy: bool = False):
        super().__init__(
            f"api return error, code: {code}, message: {message}, request_id: {request_id}"
        )
        self.code = code
        self.message = message
        self.request_id = request_id
        self.legacy = legacy


class ResponseDecodeError(DingtalkError, ValueError):
    pass


class OrganizationMembershipError(DingtalkError):
    pass
