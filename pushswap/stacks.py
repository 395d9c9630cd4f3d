"""The two push_swap stacks and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from typing import Iterable


class Stacks:
    """Stacks ``a`` and ``b``, their tops at the left, with a log of the moves made.

    Every operation that takes effect appends its name to :attr:`moves`.
    An operation that finds nothing to work on does nothing and logs nothing.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.moves: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)}, b={list(self.b)})"

    def _record(self, name: str) -> None:
        self.moves.append(name)

    @staticmethod
    def _swap_top(stack: deque[int]) -> None:
        if len(stack) >= 2:
            stack[0], stack[1] = stack[1], stack[0]

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self._record("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self._record("pb")

    def sa(self) -> None:
        """Swap the two top elements of ``a``; a single element is left in place."""
        if not self.a:
            return
        self._swap_top(self.a)
        self._record("sa")

    def sb(self) -> None:
        """Swap the two top elements of ``b``; a single element is left in place."""
        if not self.b:
            return
        self._swap_top(self.b)
        self._record("sb")

    def ss(self) -> None:
        """Do ``sa`` and ``sb``, each logged on its own, then log ``ss``."""
        self.sa()
        self.sb()
        self._record("ss")

    def ra(self) -> None:
        """Rotate ``a`` so its top goes to the bottom."""
        if not self.a:
            return
        self.a.rotate(-1)
        self._record("ra")

    def rb(self) -> None:
        """Rotate ``b`` so its top goes to the bottom."""
        if not self.b:
            return
        self.b.rotate(-1)
        self._record("rb")

    def rr(self) -> None:
        """Rotate both stacks.

        With ``a`` empty nothing happens; with only ``b`` empty, ``a`` is
        rotated but no move is logged.
        """
        if not self.a:
            return
        self.a.rotate(-1)
        if not self.b:
            return
        self.b.rotate(-1)
        self._record("rr")

    def rra(self) -> None:
        """Rotate ``a`` so its bottom comes to the top."""
        if not self.a:
            return
        self.a.rotate(1)
        self._record("rra")

    def rrb(self) -> None:
        """Rotate ``b`` so its bottom comes to the top."""
        if not self.b:
            return
        self.b.rotate(1)
        self._record("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks.

        With ``a`` empty nothing happens; with only ``b`` empty, ``a`` is
        reverse-rotated but no move is logged.
        """
        if not self.a:
            return
        self.a.rotate(1)
        if not self.b:
            return
        self.b.rotate(1)
        self._record("rrr")