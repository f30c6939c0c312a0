# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logger

from typing import Any, FrozenSet, Iterable, Mapping, Tuple

from pydantic import BaseModel, ConfigDict

REDACTED = "[REDACTED]"


class RedactionRules(BaseModel):
    """
    Literal key names and literal values to scrub from log arguments.

    Frozen so a parent and its children can hold the same instance.
    """

    model_config = ConfigDict(frozen=True)

    keys: FrozenSet[str] = frozenset()
    values: FrozenSet[str] = frozenset()

    @property
    def is_empty(self) -> bool:
        return not self.keys and not self.values


class RedactionFilter:
    """
    Replaces configured sensitive values with a fixed placeholder.
    """

    def __init__(self, rules: RedactionRules | None = None, placeholder: str = REDACTED):
        self.rules = rules or RedactionRules()
        self.placeholder = placeholder

    def sanitize(self, args: Iterable[Any]) -> Tuple[Any, ...]:
        """
        Sanitizes each positional argument independently.
        Inputs are never mutated; containers are rebuilt where needed.
        """
        if self.rules.is_empty:
            return tuple(args)
        return tuple(self._sanitize_arg(arg) for arg in args)

    def _sanitize_arg(self, value: Any) -> Any:
        if isinstance(value, str):
            return self.placeholder if value in self.rules.values else value
        if isinstance(value, Mapping):
            return self._sanitize_mapping(value)
        return value

    def _sanitize_mapping(self, data: Mapping[Any, Any]) -> dict[Any, Any]:
        redacted: dict[Any, Any] = {}
        for key, value in data.items():
            if key in self.rules.keys:
                redacted[key] = self.placeholder
            else:
                redacted[key] = self._sanitize_nested(value)
        return redacted

    def _sanitize_nested(self, value: Any) -> Any:
        # Sequences are only walked inside mappings; top-level lists pass through.
        if isinstance(value, list):
            return [self._sanitize_nested(item) for item in value]
        if isinstance(value, tuple):
            return tuple(self._sanitize_nested(item) for item in value)
        return self._sanitize_arg(value)
