# This module implements the ring zipper: a focused element plus the context on either side of it.
# It exists so callers can move a cursor forwards and backwards through a finite sequence without ever falling off an end.
# Stepping past the last element wraps to the first, and stepping before the first wraps to the last.
# Elements are never added or removed after construction; only the focus moves.

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Iterable, Iterator
from enum import Enum
from functools import total_ordering
from typing import Any, Generic, TypeVar

T = TypeVar("T")

LOGGER = logging.getLogger("zipper")


class SequenceDirection(str, Enum):
    """Direction of travel relative to the order the zipper was built from."""

    ORIGINAL = "original"
    REVERSE = "reverse"


def _move_far_half(source: deque[Any], target: deque[Any]) -> int:
    # Far end of `source` becomes the near end of `target`; rotation order is unchanged.
    moved = len(source) - len(source) // 2
    for _ in range(moved):
        target.append(source.pop())
    return moved


@total_ordering
class Zipper(Generic[T]):
    """
    Cursor over a finite sequence that treats the sequence as a ring.

    The zipper holds three parts: ``before`` (elements to the left of the focus,
    nearest first), the focused element, and ``after`` (elements to the right of
    the focus, nearest first). Reading the focus, then ``after``, then ``before``
    reversed gives the rotation order, i.e. the ring read forwards from the focus.

    An empty zipper has no focus. Stepping and refocusing an empty or
    single-element zipper leaves it unchanged.

    Equality and ordering compare rotation order, so two zippers over the same
    ring but focused on different elements are not equal.
    """

    __slots__ = ("_before", "_focus", "_after", "_size", "_position")

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._before: deque[T] = deque()
        self._after: deque[T] = deque(items)
        self._size = len(self._after)
        self._focus: T | None = self._after.popleft() if self._after else None
        self._position = 0

    @classmethod
    def from_iterable(cls, items: Iterable[T]) -> Zipper[T]:
        return cls(items)

    def focus(self) -> T | None:
        """Return the focused element, or ``None`` when the zipper is empty."""

        return self._focus

    @property
    def position(self) -> int | None:
        """Index of the focused element in the sequence the zipper was built from."""

        if self._size == 0:
            return None
        return self._position

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def step(self, direction: SequenceDirection) -> Zipper[T]:
        """Move the focus one element in ``direction``, wrapping around the ring."""

        if SequenceDirection(direction) is SequenceDirection.ORIGINAL:
            return self.step_forwards()
        return self.step_backwards()

    def step_forwards(self) -> Zipper[T]:
        if self._size <= 1:
            return self
        if not self._after:
            moved = _move_far_half(self._before, self._after)
            LOGGER.debug("seam crossed direction=original moved=%d size=%d", moved, self._size)
        self._before.appendleft(self._focus)  # type: ignore[arg-type]
        self._focus = self._after.popleft()
        self._position = (self._position + 1) % self._size
        return self

    def step_backwards(self) -> Zipper[T]:
        if self._size <= 1:
            return self
        if not self._before:
            moved = _move_far_half(self._after, self._before)
            LOGGER.debug("seam crossed direction=reverse moved=%d size=%d", moved, self._size)
        self._after.appendleft(self._focus)  # type: ignore[arg-type]
        self._focus = self._before.popleft()
        self._position = (self._position - 1) % self._size
        return self

    def refocus(self, predicate: Callable[[T], bool]) -> Zipper[T]:
        """
        Move forwards to the nearest element satisfying ``predicate``.

        The current focus is checked first. When nothing in the ring matches,
        the zipper ends where it started after one full lap.
        """

        return self._refocus(predicate, SequenceDirection.ORIGINAL)

    def refocus_backwards(self, predicate: Callable[[T], bool]) -> Zipper[T]:
        """Move backwards to the nearest element satisfying ``predicate``."""

        return self._refocus(predicate, SequenceDirection.REVERSE)

    def _refocus(self, predicate: Callable[[T], bool], direction: SequenceDirection) -> Zipper[T]:
        for _ in range(self._size):
            if predicate(self._focus):  # type: ignore[arg-type]
                return self
            self.step(direction)
        if self._size:
            LOGGER.debug("refocus found no match direction=%s size=%d", direction.value, self._size)
        return self

    def reset_start(self) -> Zipper[T]:
        """Focus the first element of the sequence the zipper was built from."""

        if self._size:
            self._realign((-self._position) % self._size)
        return self

    def reset_end(self) -> Zipper[T]:
        """Focus the last element of the sequence the zipper was built from."""

        if self._size:
            self._realign((self._size - 1 - self._position) % self._size)
        return self

    def _realign(self, offset: int) -> None:
        if offset == 0:
            return
        rotation = self.to_list()
        self._before.clear()
        self._after = deque(rotation[offset + 1 :])
        self._after.extend(rotation[:offset])
        self._focus = rotation[offset]
        self._position = (self._position + offset) % self._size

    def ith(self, index: int) -> T | None:
        """
        Return the element ``index`` steps away from the focus.

        Positive indices follow the original direction and negative indices the
        reverse one; both wrap around the ring. ``ith(0)`` is the focus.
        """

        if self._size == 0:
            return None
        offset = index % self._size
        if offset == 0:
            return self._focus
        if offset <= len(self._after):
            return self._after[offset - 1]
        return self._before[self._size - 1 - offset]

    def __getitem__(self, index: int) -> T:
        if self._size == 0:
            raise IndexError("zipper is empty")
        return self.ith(index)  # type: ignore[return-value]

    def __iter__(self) -> Iterator[T]:
        if self._size == 0:
            return
        yield self._focus  # type: ignore[misc]
        yield from self._after
        yield from reversed(self._before)

    def reverse_iter(self) -> Iterator[T]:
        """Yield every element once, starting at the focus and walking backwards."""

        if self._size == 0:
            return
        yield self._focus  # type: ignore[misc]
        yield from self._before
        yield from reversed(self._after)

    def to_list(self) -> list[T]:
        return list(self)

    def copy(self) -> Zipper[T]:
        clone: Zipper[T] = Zipper()
        clone._before = deque(self._before)
        clone._after = deque(self._after)
        clone._focus = self._focus
        clone._size = self._size
        clone._position = self._position
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Zipper):
            return NotImplemented
        return self._size == other._size and self.to_list() == other.to_list()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Zipper):
            return NotImplemented
        return self.to_list() < other.to_list()

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "[" + ", ".join(str(item) for item in self) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"
