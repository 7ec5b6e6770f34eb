from __future__ import annotations

from enum import Enum


class ScanState(str, Enum):
    UNSTARTED = "UNSTARTED"
    ACTIVE = "ACTIVE"
    EXHAUSTED = "EXHAUSTED"
