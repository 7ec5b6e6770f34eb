from __future__ import annotations

import importlib

from src.bulk.core.exceptions import InvalidInputError
from src.bulk.ports.transform import RowTransform


def load_row_transform(dotted_path: str) -> RowTransform:
    """
    dotted_path: 'src.pipelines.normalize:transform' or 'src.pipelines.normalize'
    (the module must then export transform(row)).
    """
    path = (dotted_path or "").strip()
    if not path:
        raise InvalidInputError("Transform path is empty")

    module_path, _, fn_name = path.partition(":")
    fn_name = fn_name or "transform"

    mod = importlib.import_module(module_path)
    fn = getattr(mod, fn_name, None)
    if fn is None or not callable(fn):
        raise InvalidInputError(f"Transform module {module_path!r} must export {fn_name}(row)")
    return fn
