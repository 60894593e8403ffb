"""
Ring-shaped zipper over finite sequences.
The core lives in `list_zipper.zipper`; navigation scripts and the CLI live in `list_zipper.navigation`.
Shared settings and logging helpers live in `list_zipper.common`.
"""

from list_zipper.zipper import SequenceDirection, Zipper, zipper_from_iterable, zipper_into

__all__ = [
    "SequenceDirection",
    "Zipper",
    "zipper_from_iterable",
    "zipper_into",
]
