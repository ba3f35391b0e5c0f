from __future__ import annotations
import os
import logging
from typing import Dict, Optional
import psutil

logger = logging.getLogger(__name__)

def volume_usage(path: str) -> Optional[Dict[str, float]]:
    """Usage of the volume that holds *path*, or None if psutil cannot tell."""
    try:
        u = psutil.disk_usage(os.path.abspath(path))
    except (OSError, RuntimeError) as e:
        logger.debug("disk_usage failed for %s: %s", path, e)
        return None
    return {
        "total": int(u.total),
        "used": int(u.used),
        "free": int(u.free),
        "percent": float(u.percent),
    }
