from __future__ import annotations

from importlib.metadata import version, PackageNotFoundError

from .config import ServizioConfig
from .errors import Errors
from .exceptions import (
    ServizioError,
    OperationNotCalledError,
    OperationAlreadyCalledError,
    OperationInvalidError,
    OperationFailedError,
)
from .operation import Operation
from .validation import Rule, ValidationResult, validate, presence_of, inclusion_of, satisfies

try:
    __version__ = version("servizio")
except PackageNotFoundError:
    __version__ = "development"

__all__ = [
    "Operation",
    "ServizioConfig",
    "Errors",
    "ServizioError",
    "OperationNotCalledError",
    "OperationAlreadyCalledError",
    "OperationInvalidError",
    "OperationFailedError",
    "Rule",
    "ValidationResult",
    "validate",
    "presence_of",
    "inclusion_of",
    "satisfies",
]
