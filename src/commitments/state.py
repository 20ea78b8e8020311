# SPDX-License-Identifier: MIT

from contextvars import ContextVar
from pathlib import Path
from typing import Optional

_snapshot_path: ContextVar[Optional[Path]] = ContextVar("snapshot_path", default=None)


def set_snapshot_path(value: Optional[Path]) -> None:
    _snapshot_path.set(value)


def get_snapshot_path() -> Optional[Path]:
    return _snapshot_path.get()
