from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional

if TYPE_CHECKING:
    from .operation import Operation


class ServizioError(Exception):
    """Base for programmer-usage failures raised by servizio."""


class OperationNotCalledError(ServizioError):
    """`result` was read before the work routine ran."""


class OperationAlreadyCalledError(ServizioError):
    """An operation instance was invoked a second time."""


class _OperationStateError(ServizioError):
    def __init__(self, operation: "Operation", message: Optional[str] = None) -> None:
        self.operation = operation
        self.errors: Dict[str, List[str]] = operation.errors.to_dict()
        super().__init__(message or self._describe())

    def _describe(self) -> str:
        name = type(self.operation).__name__
        messages = "; ".join(self.operation.errors.full_messages())
        return f"{name}: {messages}" if messages else name


class OperationInvalidError(_OperationStateError):
    """call_or_raise() was used but the preconditions failed."""


class OperationFailedError(_OperationStateError):
    """call_or_raise() was used and the work routine recorded errors."""
