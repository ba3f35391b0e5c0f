from __future__ import annotations
from typing import Dict, Iterable, Optional, Sequence
from .models import FileRecord, ScanSummary, Collection

def group_by_extension(records: Iterable[FileRecord]):
    counts: Dict[str, int] = {}
    sizes: Dict[str, int] = {}
    for r in records:
        counts[r.extension] = counts.get(r.extension, 0) + 1
        sizes[r.extension] = sizes.get(r.extension, 0) + r.size
    return counts, sizes

def analyze(records: Sequence[FileRecord], total_size: int,
            dir_sizes: Optional[Dict[str, int]] = None) -> ScanSummary:
    """Build the ranked and grouped views of one scan. No I/O happens here.

    Both sorts are stable, so equal keys keep traversal order. A zero
    ``last_used`` (unknown) sorts first.
    """
    records = tuple(records)
    by_size = tuple(sorted(records, key=lambda r: r.size, reverse=True))
    by_last_used = tuple(sorted(records, key=lambda r: r.last_used))
    counts, sizes = group_by_extension(records)
    return ScanSummary(
        total_file_count=len(records),
        total_size_bytes=int(total_size),
        files_by_size_descending=by_size,
        files_by_last_used_ascending=by_last_used,
        count_by_extension=counts,
        size_by_extension=sizes,
        size_by_directory=dict(dir_sizes or {}),
    )

def analyze_collection(collection: Collection) -> ScanSummary:
    return analyze(collection.records, collection.total_size, collection.dir_sizes)
