from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Tuple, Union

NO_EXTENSION = "no_extension"

@dataclass(frozen=True)
class RawEntry:
    path: str
    is_dir: bool
    size: int = 0
    mtime: float = 0.0

@dataclass(frozen=True)
class WalkError:
    path: str
    error: OSError

WalkItem = Union[RawEntry, WalkError]

@dataclass(frozen=True)
class FileRecord:
    path: str
    size: int
    extension: str
    last_used: float = 0.0  # 0.0 == unknown

@dataclass(frozen=True)
class Collection:
    records: Tuple[FileRecord, ...]
    total_size: int
    dir_sizes: Dict[str, int] = field(default_factory=dict)  # immediate parent -> bytes
    files_seen: int = 0
    dirs_seen: int = 0
    error_count: int = 0
    elapsed_sec: float = 0.0

@dataclass(frozen=True)
class ScanSummary:
    total_file_count: int
    total_size_bytes: int
    files_by_size_descending: Tuple[FileRecord, ...]
    files_by_last_used_ascending: Tuple[FileRecord, ...]
    count_by_extension: Dict[str, int]
    size_by_extension: Dict[str, int]
    size_by_directory: Dict[str, int]

@dataclass(frozen=True)
class ReportSection:
    title: str
    lines: Tuple[str, ...] = ()
