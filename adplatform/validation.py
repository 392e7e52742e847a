"""Input validation helpers: profanity checks and error formatting."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Optional, Union

from adplatform.checker import ProfanityChecker
from adplatform.errors import InvalidInputError

BAD_WORDS_CODE = "Found bad words"
ADVANCED_MAX_TYPO_DISTANCE = 1
ADVANCED_MIN_TYPO_LENGTH = 4


class ValidationError(Exception):
    """A single failed validation rule, identified by its code."""

    def __init__(self, code: str) -> None:
        super().__init__(code)
        self.code = code


@dataclass
class ValidationErrors:
    """Validation errors by field.

    A value is either nested ``ValidationErrors`` of a structure, a mapping
    from list index to ``ValidationErrors``, or the field's own errors.
    """

    errors: dict[
        str,
        Union["ValidationErrors", Mapping[int, "ValidationErrors"], Sequence[ValidationError]],
    ] = field(default_factory=dict)


def check_profanity(text: str, checker: ProfanityChecker, enabled: bool = True) -> None:
    """Raise ``ValidationError`` if moderation is on and ``text`` has bad words."""
    if enabled and checker.check(text):
        raise ValidationError(BAD_WORDS_CODE)


def check_profanity_advanced(
    text: str, checker: ProfanityChecker, enabled: bool = True
) -> None:
    """Like ``check_profanity`` but also catches words one typo away."""
    if not enabled:
        return
    advanced = checker.with_typo_check(ADVANCED_MAX_TYPO_DISTANCE, ADVANCED_MIN_TYPO_LENGTH)
    if advanced.check(text):
        raise ValidationError(BAD_WORDS_CODE)


def parse_validation_errors(errors: ValidationErrors) -> InvalidInputError:
    """Turn validation errors into the API error that reports them."""
    return InvalidInputError(validation_errors_to_string(errors, None))


def validation_errors_to_string(
    errors: ValidationErrors, adder: Optional[str] = None
) -> str:
    """Describe the first failed rule of the first failing field."""
    field_name = next(iter(errors.errors), None)
    if field_name is None:
        return ""
    kind = errors.errors[field_name]

    if isinstance(kind, ValidationErrors):
        return validation_errors_to_string(kind, f"of item {field_name}")

    if isinstance(kind, Mapping):
        if not kind:
            return ""
        index = min(kind)
        return validation_errors_to_string(
            kind[index], f"of list {field_name} with index {index}"
        )

    if not kind:
        return ""
    code = kind[0].code
    if adder is not None:
        return f"Field {field_name} {adder} failed validation with error: {code}"
    return f"Field {field_name} failed validation with error: {code}"