"""Failure types raised by assertions."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from assertive.messages import prettify


FailureKind = Literal["AssertionError", "UnsupportedOperationError"]


class FailureReport(BaseModel):
    """Structured description of a failed or unsupported assertion.

    Attributes
    ----------
    kind : str
        ``"AssertionError"`` for failed expectations, or
        ``"UnsupportedOperationError"`` for structurally meaningless calls.
    message : str
        Human-readable explanation of the failure.
    actual : Any
        The value the check observed, if relevant.
    expected : Any
        The value the check expected, if relevant.
    details : dict[str, Any]
        Extra check-specific payload (e.g. ``index`` and ``length`` for an
        out of bounds extraction).
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    kind: FailureKind
    message: str
    actual: Any = None
    expected: Any = None
    details: dict[str, Any] = Field(default_factory=dict)

    def to_payload(self) -> dict[str, Any]:
        """Return a JSON-friendly view with values rendered as text."""
        payload: dict[str, Any] = {"kind": self.kind, "message": self.message}
        if self.actual is not None:
            payload["actual"] = prettify(self.actual)
        if self.expected is not None:
            payload["expected"] = prettify(self.expected)
        if self.details:
            payload["details"] = dict(self.details)
        return payload


class AssertionFailedError(AssertionError):
    """AssertionError with an attached FailureReport.

    Raised whenever a check does not hold, negated or not. Test runners see
    it as a regular ``AssertionError``.
    """

    def __init__(
        self,
        message: str,
        *,
        actual: Any = None,
        expected: Any = None,
        details: dict[str, Any] | None = None,
    ):
        self.report = FailureReport(
            kind="AssertionError",
            message=message,
            actual=actual,
            expected=expected,
            details=details or {},
        )
        super().__init__(message)

    @property
    def message(self) -> str:
        return self.report.message

    @property
    def actual(self) -> Any:
        return self.report.actual

    @property
    def expected(self) -> Any:
        return self.report.expected


class UnsupportedOperationError(Exception):
    """Raised when an operation is used in a meaningless combination.

    Signals a programmer error (e.g. narrowing a negated assertion) rather
    than a failed expectation. Not an ``AssertionError`` subclass.
    """

    def __init__(self, message: str):
        self.report = FailureReport(kind="UnsupportedOperationError", message=message)
        super().__init__(message)

    @property
    def message(self) -> str:
        return self.report.message
