"""
Adapters between plain iterables and `Zipper`.
Construction consumes any finite iterable; export hands the rotation order to any consumer.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TypeVar

from list_zipper.zipper.ring_zipper import Zipper

T = TypeVar("T")
TResult = TypeVar("TResult")


def zipper_from_iterable(items: Iterable[T]) -> Zipper[T]:
    """Build a zipper focused on the first element produced by ``items``."""

    return Zipper(items)


def zipper_into(
    zipper: Zipper[T],
    factory: Callable[[Iterator[T]], TResult] = list,  # type: ignore[assignment]
) -> TResult:
    """Feed the zipper's rotation order into ``factory`` and return the result."""

    return factory(iter(zipper))
