"""
Merge and coalesce sync and async streams.

The main entry points are [`KMerge`][stream_more.KMerge], which merges sorted
streams into one sorted stream, and [`Coalesce`][stream_more.Coalesce], which
fuses adjacent items of a stream. The functions in `stream_more.ops` build
both from streams directly.
"""

from .coalesce import Apart, Coalesce, Combined
from .comparators import (
    Ascending,
    Compare,
    Descending,
    FnCmp,
    KeyCmp,
    Ordering,
    ThreeWayCmp,
)
from .kmerge import KMerge
from .ops import coalesce, kmerge_by, kmerge_by_cmp, kmerge_max, kmerge_min
from .peeked import Peeked

__all__ = [
    "Apart",
    "Ascending",
    "Coalesce",
    "Combined",
    "Compare",
    "Descending",
    "FnCmp",
    "KMerge",
    "KeyCmp",
    "Ordering",
    "Peeked",
    "ThreeWayCmp",
    "coalesce",
    "kmerge_by",
    "kmerge_by_cmp",
    "kmerge_max",
    "kmerge_min",
]
