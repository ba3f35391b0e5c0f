from __future__ import annotations
import time
from typing import Callable, Dict, Iterable, List, Optional, TypeVar
from .config import ScanConfig
from .models import Collection, FileRecord, ReportSection, ScanSummary
from .utils import format_bytes, format_age, printable

NONE_FOUND = "(none found)"
NO_FILES_MESSAGE = "No files found matching the criteria."
SECONDS_PER_DAY = 86400

K = TypeVar("K")
V = TypeVar("V")

def rank_mapping(mapping: Dict[K, V], top: int,
                 fmt: Callable[[V], str],
                 key: Callable[[V], object] = lambda v: v) -> List[str]:
    """Render the *top* entries of *mapping* by value, largest first.

    Equal values come out in key order.
    """
    if top <= 0:
        return []
    items = sorted(mapping.items(), key=lambda kv: kv[0])
    items.sort(key=lambda kv: key(kv[1]), reverse=True)
    return [f"{fmt(v)} - {printable(str(k))}" for k, v in items[:top]]

def file_line(rec: FileRecord, now: float) -> str:
    return f"{format_bytes(rec.size)} - {printable(rec.path)} (Last used: {format_age(rec.last_used, now)})"

def largest_files(summary: ScanSummary, top: int, now: float) -> List[str]:
    if top <= 0:
        return []
    return [file_line(r, now) for r in summary.files_by_size_descending[:top]]

def unused_files(summary: ScanSummary, top: int, days_unused: int, now: float) -> List[str]:
    """Oldest files last used strictly before the cutoff, or a single NONE_FOUND line."""
    if top <= 0:
        return []
    cutoff = now - days_unused * SECONDS_PER_DAY
    out: List[str] = []
    for r in summary.files_by_last_used_ascending:
        if r.last_used < cutoff:
            out.append(file_line(r, now))
            if len(out) >= top:
                break
    return out or [NONE_FOUND]

def header_lines(config: ScanConfig) -> List[str]:
    return [
        f"Analyzing files in: {printable(config.root)}",
        f"Showing top {config.top} results",
        f"Considering files larger than {format_bytes(config.min_size)} as significant",
        f"Considering files unused if not accessed in {config.days_unused} days",
    ]

def general_lines(summary: ScanSummary,
                  collection: Optional[Collection] = None,
                  volume: Optional[Dict[str, float]] = None) -> List[str]:
    lines = [
        f"Total files analyzed: {summary.total_file_count}",
        f"Total size analyzed: {format_bytes(summary.total_size_bytes)}",
    ]
    if collection is not None:
        lines.append(f"Files seen: {collection.files_seen} in {collection.dirs_seen} directories")
        if collection.error_count:
            lines.append(f"Entries skipped due to errors: {collection.error_count}")
        lines.append(f"Scan time: {collection.elapsed_sec:.2f}s")
    if volume:
        lines.append(
            f"Volume usage: {format_bytes(int(volume['used']))} of "
            f"{format_bytes(int(volume['total']))} ({volume['percent']:.1f}%)"
        )
    return lines

def build_report(summary: ScanSummary, config: ScanConfig,
                 now: Optional[float] = None,
                 collection: Optional[Collection] = None,
                 volume: Optional[Dict[str, float]] = None) -> List[ReportSection]:
    if now is None:
        now = time.time()
    top = config.top
    sections = [
        ReportSection("General Information", general_lines(summary, collection, volume)),
        ReportSection(f"Top {top} Largest Files", largest_files(summary, top, now)),
        ReportSection(
            f"Top {top} Oldest/Unused Files (not accessed in {config.days_unused} days)",
            unused_files(summary, top, config.days_unused, now),
        ),
        ReportSection("File Extensions by Count",
                      rank_mapping(summary.count_by_extension, top, lambda v: f"{v} files")),
        ReportSection("File Extensions by Size",
                      rank_mapping(summary.size_by_extension, top, format_bytes)),
        ReportSection(f"Top {top} Largest Directories",
                      rank_mapping(summary.size_by_directory, top, format_bytes)),
    ]
    return [ReportSection(s.title, tuple(s.lines)) for s in sections]

def render_report(sections: Iterable[ReportSection]) -> str:
    out: List[str] = []
    for s in sections:
        out.append("")
        out.append(f"=== {s.title} ===")
        out.extend(s.lines)
    return "\n".join(out)
