"""Typed configuration read from environment variables with defaults."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class InvalidVariableError(ValueError):
    """An environment variable holds a value of the wrong type."""


def _parse_bool(raw: str) -> bool:
    if raw == "true":
        return True
    if raw == "false":
        return False
    raise ValueError(raw)


@dataclass(frozen=True)
class Variable:
    """A named setting with its type and default value."""

    name: str
    type: Callable[[str], Any]
    default: Any

    def _parse(self, raw: str) -> Any:
        if self.type is bool:
            return _parse_bool(raw)
        return self.type(raw)

    def resolve(self, environ: Optional[Mapping[str, str]] = None) -> Any:
        """Read the value from ``environ``, falling back to the default."""
        env = os.environ if environ is None else environ
        raw = env.get(self.name)
        if raw is None:
            logger.warning(
                "Variable `%s` is missing in the env! Using default value `%s`",
                self.name,
                self.default,
            )
            return self.default
        try:
            return self._parse(raw)
        except (ValueError, TypeError) as exc:
            type_name = getattr(self.type, "__name__", repr(self.type))
            raise InvalidVariableError(
                f"Invalid value type for the variable `{self.name}`! "
                f"Expected type `{type_name}`, got `{type(raw).__name__}`."
            ) from exc


class Config:
    """Lazily resolved set of variables; each is read once and then cached."""

    def __init__(
        self, variables: Iterable[Variable], environ: Optional[Mapping[str, str]] = None
    ) -> None:
        self._variables = {variable.name: variable for variable in variables}
        self._environ = environ
        self._values: dict[str, Any] = {}

    def init(self) -> None:
        """Resolve every variable now, raising on the first invalid one."""
        for name in self._variables:
            self[name]

    def __contains__(self, name: object) -> bool:
        return name in self._variables

    def __getitem__(self, name: str) -> Any:
        if name not in self._values:
            try:
                variable = self._variables[name]
            except KeyError:
                raise KeyError(name) from None
            self._values[name] = variable.resolve(self._environ)
        return self._values[name]