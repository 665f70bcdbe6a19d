"""Tagged outcome of a single API call."""

from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel


class FailureReason(str, Enum):
    """Why an API call failed."""

    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    MALFORMED_BODY = "malformed_body"


class ApiResult(BaseModel):
    """Success or failure of an API call, before it is collapsed for callers."""

    ok: bool
    value: Any = None
    reason: Optional[FailureReason] = None
    status_code: Optional[int] = None
    detail: str = ""

    @classmethod
    def success(cls, value: Any = None, status_code: Optional[int] = None) -> "ApiResult":
        return cls(ok=True, value=value, status_code=status_code)

    @classmethod
    def failure(
        cls,
        reason: FailureReason,
        detail: str = "",
        status_code: Optional[int] = None
    ) -> "ApiResult":
        return cls(ok=False, reason=reason, detail=detail, status_code=status_code)

    def unwrap_or(self, default: Any) -> Any:
        """Return the value on success, otherwise the given default."""
        return self.value if self.ok else default
