"""Root error class for the mp-scheduler error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    Every error carries a ``code`` slug and a ``detail`` dict that is logged
    as-is, so ``detail`` must stay JSON-friendly. Job errors put the job's
    label under ``detail["job"]``.

    Args:
        message: Human-readable description.
        code: Machine-readable slug; ``default_code`` when omitted.
        detail: Structured context for the log line.
        cause: Exception being wrapped, chained as ``__cause__``.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code if code is not None else self.default_code
        self.detail: dict[str, Any] = dict(detail) if detail else {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    @property
    def job(self) -> str | None:
        """Label of the job the error is about, if any."""
        return self.detail.get("job")

    def to_dict(self) -> dict[str, Any]:
        """Fields for a structured log event."""
        fields: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.detail}
        if self.cause is not None:
            fields["cause"] = repr(self.cause)
        return fields

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


__all__ = ["BaseError"]
