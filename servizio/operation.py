from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional, Sequence

from .config import ServizioConfig
from .errors import Errors
from .exceptions import (
    OperationAlreadyCalledError,
    OperationFailedError,
    OperationInvalidError,
    OperationNotCalledError,
)
from .validation import Rule, ValidationResult, validate


logger = logging.getLogger(__name__)

DEFAULT_CONFIG = ServizioConfig()


@dataclass(eq=False)
class Operation:
    """
    Base for validated, single-invocation command objects.

    Concrete operations are dataclasses; their fields are the configuration
    assigned at construction. Declare them with eq=False so instances keep
    identity equality and stay hashable:

        @dataclass(eq=False)
        class Sum(Operation):
            rules = presence_of("summands")

            summands: Optional[List[int]] = None

            def perform(self) -> int:
                return sum(self.summands)

        Sum.run(summands=[1, 2])          # -> 3
        Sum.run()                         # -> None (invalid)
        Sum(summands=[1, 2]).call().result

    Lifecycle:
      - call() runs the validation gate first. An invalid operation is
        returned untouched apart from `errors`; `called` stays False.
      - a valid operation is marked called, then perform() runs once and
        its return value becomes `result`.
      - perform() reports domain failures through `errors` or
        mark_failed(), never by raising.
    """

    config: ClassVar[ServizioConfig] = DEFAULT_CONFIG
    rules: ClassVar[Sequence[Rule]] = ()

    errors: Errors = field(default_factory=Errors, init=False, repr=False, compare=False)
    _called: bool = field(default=False, init=False, repr=False, compare=False)
    _result: Any = field(default=None, init=False, repr=False, compare=False)
    # Verdict of the most recent validation gate run by call()
    _gate_passed: bool = field(default=False, init=False, repr=False, compare=False)

    # ------------ class-level entry points ------------

    @classmethod
    def run(cls, **configuration: Any) -> Optional[Any]:
        """
        Build an instance, call it and return its result.

        Returns None when the operation was invalid *or* failed; use the
        instance API to tell the two apart.
        """
        operation = cls(**configuration).call()
        if operation.succeeded:
            return operation.result
        return None

    @classmethod
    def run_or_raise(cls, **configuration: Any) -> Any:
        return cls(**configuration).call_or_raise().result

    # ------------ validation gate ------------

    def validate(self) -> ValidationResult:
        return validate(self, self.rules)

    def is_valid(self) -> bool:
        outcome = self.validate()
        self.errors.merge(outcome.violations)
        return outcome.valid

    # ------------ invocation ------------

    def perform(self) -> Any:
        """Work routine. Subclasses read their fields and return the result."""
        raise NotImplementedError(f"{type(self).__name__} must implement perform()")

    def call(self) -> "Operation":
        name = type(self).__name__

        rerun = self._called
        if rerun and self.config.reinvocation == "raise":
            raise OperationAlreadyCalledError(f"{name} was already called")

        self._gate_passed = self.is_valid()
        if not self._gate_passed:
            logger.debug("%s: preconditions failed, skipping: %s", name, self.errors.to_dict())
            return self

        if rerun:
            logger.warning("%s: already called, running work routine again", name)

        self._called = True
        logger.debug("%s: running", name)
        self._result = self.perform()

        if self.errors:
            logger.debug("%s: finished with errors: %s", name, self.errors.to_dict())
        else:
            logger.debug("%s: succeeded", name)
        return self

    def call_or_raise(self) -> "Operation":
        self.call()
        if not self._gate_passed:
            raise OperationInvalidError(self)
        if self.errors:
            raise OperationFailedError(self)
        return self

    def mark_failed(self) -> "Operation":
        self.errors.add(self.config.failure_subject, self.config.failure_message)
        return self

    # ------------ queries ------------

    @property
    def called(self) -> bool:
        return self._called

    @property
    def failed(self) -> bool:
        return bool(self.errors)

    @property
    def succeeded(self) -> bool:
        return self._called and not self.errors

    @property
    def result(self) -> Any:
        if not self._called:
            raise OperationNotCalledError(
                f"{type(self).__name__}: result is not available before the operation is called"
            )
        return self._result
