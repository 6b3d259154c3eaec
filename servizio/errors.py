from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Mapping, Tuple


BASE = "base"


class Errors:
    """
    Ordered multi-map of subject -> messages.

    Subjects keep the order in which they were first added; messages keep
    the order in which they were added for their subject.
    """

    def __init__(self) -> None:
        self._messages: Dict[str, List[str]] = {}

    def add(self, subject: str, message: str) -> None:
        self._messages.setdefault(str(subject), []).append(message)

    def merge(self, violations: Mapping[str, Iterable[str]]) -> None:
        """
        Add every (subject, message) pair of `violations` that is not
        already recorded.
        """
        for subject, messages in violations.items():
            known = self._messages.get(str(subject), [])
            for message in messages:
                if message not in known:
                    self.add(subject, message)
                    known = self._messages[str(subject)]

    def clear(self) -> None:
        self._messages.clear()

    def subjects(self) -> List[str]:
        return list(self._messages)

    def full_messages(self) -> List[str]:
        out: List[str] = []
        for subject, message in self:
            if subject == BASE:
                out.append(message)
            else:
                out.append(f"{subject} {message}")
        return out

    def to_dict(self) -> Dict[str, List[str]]:
        return {subject: list(messages) for subject, messages in self._messages.items()}

    def __getitem__(self, subject: str) -> List[str]:
        return list(self._messages.get(str(subject), []))

    def __contains__(self, subject: object) -> bool:
        return str(subject) in self._messages

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        for subject, messages in self._messages.items():
            for message in messages:
                yield subject, message

    def __len__(self) -> int:
        return sum(len(messages) for messages in self._messages.values())

    def __bool__(self) -> bool:
        return bool(self._messages)

    def __repr__(self) -> str:
        return f"Errors({self.to_dict()!r})"
