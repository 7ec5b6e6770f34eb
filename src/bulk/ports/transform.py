from __future__ import annotations

from typing import Callable, TypeAlias

from src.bulk.ports.reader import Row


RowTransform: TypeAlias = Callable[[Row], Row]
