"""Runtime helpers for counting how often workflow functions execute."""

from __future__ import annotations

import json
import os
import threading
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Dict, Optional

_LOCK = threading.RLock()
_DEFAULT_FILE = Path(__file__).resolve().parents[1] / "data" / "function_call_counts.json"
_TRACKING_FILE = Path(os.getenv("TRACKING_FILE", str(_DEFAULT_FILE)))
_ENABLED = os.getenv("TRACKING_ENABLED", "true").strip().lower() in {"1", "true", "yes", "on"}
_COUNTS: Dict[str, int] = {}


def _load_counts() -> None:
    if not _TRACKING_FILE.exists():
        return

    try:
        with _TRACKING_FILE.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, ValueError, TypeError):
        return

    if not isinstance(data, dict):
        return

    for name, raw_count in data.items():
        if not name:
            continue
        try:
            count = int(raw_count)
        except (TypeError, ValueError):
            continue
        _COUNTS[str(name)] = max(count, 0)


def _persist_counts_locked() -> None:
    """Write the in-memory counts to disk. Caller must hold ``_LOCK``."""
    tmp_path: Optional[Path] = None
    try:
        _TRACKING_FILE.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            "w", encoding="utf-8", dir=_TRACKING_FILE.parent, delete=False
        ) as handle:
            json.dump(_COUNTS, handle, sort_keys=True)
            handle.write("\n")
            tmp_path = Path(handle.name)
        tmp_path.replace(_TRACKING_FILE)
    except OSError:
        if tmp_path is not None:
            try:
                tmp_path.unlink()
            except OSError:
                pass


def t(func_name: str) -> None:
    """Record one call of ``func_name``."""
    if not func_name or not _ENABLED:
        return

    with _LOCK:
        _COUNTS[func_name] = _COUNTS.get(func_name, 0) + 1
        _persist_counts_locked()


if _ENABLED:
    _load_counts()
