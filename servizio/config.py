from __future__ import annotations

from dataclasses import dataclass


REINVOCATION_POLICIES = ("raise", "rerun")


@dataclass
class ServizioConfig:
    """
    Library-level policy for operations.

    reinvocation:
      "raise" -> calling an already-called operation raises
                 OperationAlreadyCalledError
      "rerun" -> the work routine simply runs again
    """
    reinvocation: str = "raise"

    # Marker error recorded by Operation.mark_failed()
    failure_subject: str = "call"
    failure_message: str = "failed"

    def __post_init__(self) -> None:
        if self.reinvocation not in REINVOCATION_POLICIES:
            raise ValueError(
                f"ServizioConfig: reinvocation must be one of {REINVOCATION_POLICIES}, "
                f"got {self.reinvocation!r}"
            )
