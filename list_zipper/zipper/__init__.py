"""
Zipper core and the adapters that move data in and out of it.
"""

from list_zipper.zipper.conversion import zipper_from_iterable, zipper_into
from list_zipper.zipper.ring_zipper import SequenceDirection, Zipper

__all__ = [
    "SequenceDirection",
    "Zipper",
    "zipper_from_iterable",
    "zipper_into",
]
