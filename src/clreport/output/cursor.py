"""Indentation cursor shared between a report walker and a formatter."""

from clreport.core.constants import INDENT_UNIT
from clreport.core.exceptions import MismatchedTagError, UnbalancedNestingError


class IndentCursor:
    """
    Mutable indentation prefix that tracks element nesting.

    Every opened element pushes one indentation unit, every closed element
    pops one. The cursor remembers the open tags so a close that does not
    match the last open fails immediately instead of producing invalid output.
    """

    def __init__(self, base: str = ""):
        self._base = base
        self._open: list[str | None] = []

    @property
    def base(self) -> str:
        return self._base

    @property
    def depth(self) -> int:
        """Number of currently open elements."""
        return len(self._open)

    @property
    def value(self) -> str:
        """Prefix for the next line at the current depth."""
        return self._base + INDENT_UNIT * len(self._open)

    @property
    def open_tags(self) -> tuple[str | None, ...]:
        return tuple(self._open)

    def push(self, tag: str | None = None) -> str:
        """Open one nesting level and return the new prefix."""
        self._open.append(tag)
        return self.value

    def pop(self, tag: str | None = None) -> str:
        """
        Close one nesting level and return the new prefix.

        Args:
            tag: Tag being closed; checked against the last pushed tag when both are known

        Raises:
            UnbalancedNestingError: If nothing is open
            MismatchedTagError: If tag differs from the last pushed tag
        """
        if not self._open:
            raise UnbalancedNestingError(depth=0, tag=tag)
        expected = self._open[-1]
        if tag is not None and expected is not None and tag != expected:
            raise MismatchedTagError(expected=expected, actual=tag)
        self._open.pop()
        return self.value

    def reset(self) -> None:
        """Drop all open levels."""
        self._open.clear()

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"IndentCursor(base={self._base!r}, depth={self.depth})"
