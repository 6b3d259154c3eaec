from __future__ import annotations

from collections.abc import Sized
from dataclasses import dataclass, field
from typing import Any, Callable, Container, Dict, Iterable, List, Tuple


Predicate = Callable[[Any], bool]


@dataclass(frozen=True)
class Rule:
    """
    A single precondition: `predicate(getattr(obj, field))` must hold,
    otherwise `message` is reported for `field`.
    """
    field: str
    predicate: Predicate
    message: str

    def check(self, obj: Any) -> bool:
        return bool(self.predicate(getattr(obj, self.field, None)))


@dataclass
class ValidationResult:
    valid: bool = True
    violations: Dict[str, List[str]] = field(default_factory=dict)

    def add_violation(self, subject: str, message: str) -> None:
        self.violations.setdefault(subject, []).append(message)
        self.valid = False


def validate(obj: Any, rules: Iterable[Rule]) -> ValidationResult:
    """
    Evaluate `rules` against `obj` in order, collecting every violation.
    """
    result = ValidationResult()
    for rule in rules:
        if not rule.check(obj):
            result.add_violation(rule.field, rule.message)
    return result


# ------------ rule builders ------------

def _is_present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, Sized):
        return len(value) > 0
    return True


def presence_of(*fields: str, message: str = "can't be blank") -> Tuple[Rule, ...]:
    return tuple(Rule(name, _is_present, message) for name in fields)


def inclusion_of(
    field_name: str,
    choices: Container[Any],
    message: str = "is not included in the list",
) -> Rule:
    return Rule(field_name, lambda value: value in choices, message)


def satisfies(field_name: str, predicate: Predicate, message: str) -> Rule:
    return Rule(field_name, predicate, message)
