from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

DEFAULT_ROOT = "."
DEFAULT_TOP = 10
DEFAULT_MIN_SIZE = 1000000
DEFAULT_DAYS_UNUSED = 30

@dataclass(frozen=True)
class ScanConfig:
    """Settings for one run, built once from the command line.

    ``top`` of zero or less is allowed and means every ranked section
    comes out empty.
    """
    root: str = DEFAULT_ROOT
    top: int = DEFAULT_TOP
    min_size: int = DEFAULT_MIN_SIZE
    days_unused: int = DEFAULT_DAYS_UNUSED
    verbose: bool = False

    @classmethod
    def from_args(cls, args) -> "ScanConfig":
        return cls(
            root=args.dir,
            top=args.top,
            min_size=args.min_size,
            days_unused=args.days_unused,
            verbose=bool(getattr(args, "verbose", False)),
        )

    def validate(self) -> Optional[str]:
        if not self.root:
            return "directory path cannot be empty"
        if self.min_size < 0:
            return "minimum size must not be negative"
        if self.days_unused < 0:
            return "days unused must not be negative"
        return None
