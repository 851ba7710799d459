"""K-way merge of sorted streams."""

from .heap_entry import HeapEntry, HeapEntryCmp
from .kmerge import KMerge

__all__ = [
    "HeapEntry",
    "HeapEntryCmp",
    "KMerge",
]
