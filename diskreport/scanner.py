from __future__ import annotations
import os
import time
import logging
import stat as statmod
from typing import Callable, Dict, Iterable, Iterator, List, Optional
from .utils import printable
from .models import NO_EXTENSION, RawEntry, WalkError, WalkItem, FileRecord, Collection

logger = logging.getLogger(__name__)

# Returns an access timestamp or None when it cannot be obtained.
AccessProbe = Callable[[str], Optional[float]]

class ScanError(RuntimeError):
    """The walk could not be started at all."""

def _sorted_entries(dir_path: str) -> List[os.DirEntry]:
    with os.scandir(dir_path) as it:
        return sorted(it, key=lambda e: e.name)

def walk_entries(root: str) -> Iterator[WalkItem]:
    """Yield every entry under *root* depth-first in lexical order.

    Entries that cannot be examined come out as ``WalkError`` items; only a
    root that cannot be examined or listed raises ``ScanError``. Symlinks are
    reported as themselves and never followed. Yielded paths are normalised,
    so a root of ``.`` gives ``a/b.bin`` rather than ``./a/b.bin``.
    """
    try:
        st = os.stat(root)
    except OSError as e:
        raise ScanError(f"cannot access {root}: {e.strerror or e}") from e

    root_path = os.path.normpath(root)
    if not statmod.S_ISDIR(st.st_mode):
        yield RawEntry(path=root_path, is_dir=False, size=int(st.st_size), mtime=float(st.st_mtime))
        return

    try:
        children = _sorted_entries(root)
    except OSError as e:
        raise ScanError(f"cannot list {root}: {e.strerror or e}") from e

    yield RawEntry(path=root_path, is_dir=True, size=0, mtime=float(st.st_mtime))

    stack = [iter(children)]
    while stack:
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue

        path = os.path.normpath(entry.path)
        try:
            est = entry.stat(follow_symlinks=False)
        except OSError as e:
            yield WalkError(path=path, error=e)
            continue

        if statmod.S_ISDIR(est.st_mode):
            yield RawEntry(path=path, is_dir=True, size=0, mtime=float(est.st_mtime))
            try:
                stack.append(iter(_sorted_entries(entry.path)))
            except OSError as e:
                yield WalkError(path=path, error=e)
        else:
            yield RawEntry(path=path, is_dir=False,
                           size=int(getattr(est, "st_size", 0) or 0),
                           mtime=float(est.st_mtime))

def probe_access_time(path: str) -> Optional[float]:
    # Best effort: atime is not maintained everywhere, callers fall back to mtime.
    flags = os.O_RDONLY | getattr(os, "O_NONBLOCK", 0)
    try:
        fd = os.open(path, flags)
    except OSError:
        return None
    try:
        st = os.fstat(fd)
    except OSError:
        return None
    finally:
        os.close(fd)
    return float(st.st_atime) or None

def extension_of(path: str) -> str:
    name = os.path.basename(path)
    dot = name.rfind(".")
    if dot < 0:
        return NO_EXTENSION
    return name[dot + 1:].lower()

def collect(items: Iterable[WalkItem],
            min_size: int = 0,
            probe: Optional[AccessProbe] = probe_access_time) -> Collection:
    """Filter walked entries into ``FileRecord``s and accumulate totals.

    Files smaller than *min_size* never reach any total. Each kept file's
    size is attributed to its immediate parent directory only.
    """
    t0 = time.time()
    records: List[FileRecord] = []
    dir_sizes: Dict[str, int] = {}
    total = 0
    files = 0
    dirs = 0
    errors = 0

    for item in items:
        if isinstance(item, WalkError):
            errors += 1
            logger.warning("Error accessing %s: %s", printable(item.path), item.error)
            continue
        if item.is_dir:
            dirs += 1
            continue

        files += 1
        if item.size < min_size:
            continue

        last_used = item.mtime
        if probe is not None:
            atime = probe(item.path)
            if atime:
                last_used = atime
            else:
                logger.debug("No access time for %s, using mtime", item.path)

        records.append(FileRecord(path=item.path, size=item.size,
                                  extension=extension_of(item.path),
                                  last_used=last_used))
        total += item.size
        parent = os.path.dirname(item.path) or os.curdir
        dir_sizes[parent] = dir_sizes.get(parent, 0) + item.size

    return Collection(
        records=tuple(records),
        total_size=total,
        dir_sizes=dir_sizes,
        files_seen=files,
        dirs_seen=dirs,
        error_count=errors,
        elapsed_sec=time.time() - t0,
    )

def scan_tree(root: str, min_size: int = 0,
              probe: Optional[AccessProbe] = probe_access_time) -> Collection:
    return collect(walk_entries(root), min_size=min_size, probe=probe)
