"""Password strength policy: minimum length plus character-class diversity."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum, StrEnum
from typing import Final

MINIMUM_LENGTH: Final = 6


class CharacterClass(StrEnum):
    """Character classes counted by the strength policy, in evaluation order."""

    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    DIGIT = "digit"
    SPECIAL = "special"


_CLASS_PATTERNS: Final[tuple[tuple[CharacterClass, re.Pattern[str]], ...]] = (
    (CharacterClass.LOWERCASE, re.compile(r"[a-z]")),
    (CharacterClass.UPPERCASE, re.compile(r"[A-Z]")),
    (CharacterClass.DIGIT, re.compile(r"[0-9]")),
    (CharacterClass.SPECIAL, re.compile(r"[^A-Za-z0-9_]")),
)


class StrengthState(IntEnum):
    """Saturating count of matched character classes."""

    NONE = 0
    ONE = 1
    TWO = 2
    THREE = 3

    def advance(self) -> StrengthState:
        """Return the next state, staying at THREE once reached."""

        return StrengthState(min(self + 1, StrengthState.THREE))

    @staticmethod
    def reset() -> StrengthState:
        return StrengthState.NONE


@dataclass(frozen=True)
class StrengthReport:
    """Outcome of evaluating one password against the policy."""

    long_enough: bool
    matched_classes: tuple[CharacterClass, ...]
    state: StrengthState

    @property
    def accepted(self) -> bool:
        return self.long_enough and self.state is StrengthState.THREE


class PasswordStrengthPolicy:
    """Accept passwords with at least `minimum_length` chars and three character classes."""

    def __init__(self, *, minimum_length: int = MINIMUM_LENGTH) -> None:
        self._minimum_length = minimum_length

    def evaluate(self, password: str | None) -> StrengthReport:
        """Evaluate every character-class predicate and report the resulting state."""

        if not password or len(password) < self._minimum_length:
            return StrengthReport(
                long_enough=False,
                matched_classes=(),
                state=StrengthState.reset(),
            )

        # Counter is local to this call; concurrent evaluations never share it.
        state = StrengthState.reset()
        matched: list[CharacterClass] = []
        for character_class, pattern in _CLASS_PATTERNS:
            if pattern.search(password):
                matched.append(character_class)
                state = state.advance()

        return StrengthReport(long_enough=True, matched_classes=tuple(matched), state=state)

    def is_valid(self, password: str | None) -> bool:
        return self.evaluate(password).accepted


_DEFAULT_POLICY: Final = PasswordStrengthPolicy()


def is_password_strong(password: str | None) -> bool:
    """Return whether password meets the default strength policy."""

    return _DEFAULT_POLICY.is_valid(password)
