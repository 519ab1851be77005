"""Named colour lookup loaded from a plain-text table of ``name hexvalue`` pairs."""

from __future__ import annotations

import os
import re
from collections import deque

COLOR_MAX = 0xFFFFFFFF

_HEX_PREFIX = re.compile(r"(?:0[xX])?[0-9a-fA-F]+")


class ColorTable:
    """Maps colour names to 32-bit unsigned colour values.

    The table is filled once: after a successful :meth:`load`, later loads
    leave it unchanged.  Unknown names map to ``0``.
    """

    def __init__(self) -> None:
        self._colors: dict[str, int] = {}
        self.loaded = False

    def load(self, path: str | os.PathLike[str]) -> None:
        """Read colour definitions from *path*; raises ``OSError`` if it cannot be opened."""
        if self.loaded:
            return
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
        self._parse(text)
        self.loaded = True

    def get(self, name: str) -> int:
        """Return the colour stored under *name*, or ``0`` when it is unknown."""
        return self._colors.get(name, 0)

    def __contains__(self, name: object) -> bool:
        return name in self._colors

    def __len__(self) -> int:
        return len(self._colors)

    def _parse(self, text: str) -> None:
        tokens = deque(text.split())
        while tokens:
            name = tokens.popleft()
            if not tokens:
                self._colors[name] = 0
                return
            token = tokens.popleft()
            match = _HEX_PREFIX.match(token)
            if match is None:
                # An unreadable value ends the table, leaving the name at zero.
                self._colors[name] = 0
                return
            value = int(match.group(), 16)
            if value > COLOR_MAX:
                self._colors[name] = COLOR_MAX
                return
            self._colors[name] = value
            rest = token[match.end():]
            if rest:
                tokens.appendleft(rest)