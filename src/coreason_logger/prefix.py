# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logger

from typing import Iterable, Iterator, Tuple

from coreason_logger.colors import colorize, hex_for_text


class PrefixChain:
    """
    Ordered name segments locating a logger in a component hierarchy,
    e.g. ("@app", "core", "db").

    Immutable: append() returns a new chain.
    """

    __slots__ = ("_segments",)

    def __init__(self, segments: Iterable[str] = ()):
        self._segments: Tuple[str, ...] = tuple(s for s in segments if s)

    @property
    def segments(self) -> Tuple[str, ...]:
        return self._segments

    def append(self, *segments: str) -> "PrefixChain":
        return PrefixChain(self._segments + tuple(segments))

    def render(self, separator: str = "/", colorize_segments: bool = True) -> str:
        if colorize_segments:
            return separator.join(colorize(hex_for_text(s), s) for s in self._segments)
        return separator.join(self._segments)

    def __iter__(self) -> Iterator[str]:
        return iter(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def __bool__(self) -> bool:
        return bool(self._segments)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrefixChain):
            return NotImplemented
        return self._segments == other._segments

    def __hash__(self) -> int:
        return hash(self._segments)

    def __repr__(self) -> str:
        return f"PrefixChain({list(self._segments)!r})"
