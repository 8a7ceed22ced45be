from __future__ import annotations

import json
import math
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Mapping, Optional, Sequence, Union

import numpy as np
import pandas as pd

Row = Mapping[str, Any]
Rows = Union[Sequence[Row], pd.DataFrame]


def to_jsonable(obj: Any) -> Any:
    """Convert obj into plain JSON types.

    Handles values that typically come out of pandas/numpy summaries:
    numpy scalars and arrays, timestamps, missing markers and Decimal.
    NaN and infinities become None so the output stays valid JSON.
    """
    if obj is None or isinstance(obj, (str, bool)):
        return obj
    if obj is pd.NA or obj is pd.NaT:
        return None
    if isinstance(obj, Mapping):
        return {str(k): to_jsonable(v) for k, v in obj.items()}
    if isinstance(obj, pd.DataFrame):
        return [to_jsonable(r) for r in obj.to_dict(orient="records")]
    if isinstance(obj, pd.Series):
        return {str(k): to_jsonable(v) for k, v in obj.items()}
    if isinstance(obj, np.ndarray):
        return [to_jsonable(v) for v in obj.tolist()]
    if isinstance(obj, (list, tuple, set, frozenset)):
        return [to_jsonable(v) for v in obj]
    if isinstance(obj, np.generic):
        return to_jsonable(obj.item())
    if isinstance(obj, float):
        return obj if math.isfinite(obj) else None
    if isinstance(obj, int):
        return obj
    if isinstance(obj, Decimal):
        return to_jsonable(float(obj))
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    return str(obj)


def to_json_text(obj: Any) -> str:
    """Readable JSON text (2-space indent, non-ASCII kept as is)."""
    return json.dumps(to_jsonable(obj), indent=2, ensure_ascii=False)


def sample_records(rows: Rows, limit: Optional[int] = None) -> list[dict[str, Any]]:
    """Return the row records of a sample, optionally keeping only the first `limit`."""
    if isinstance(rows, pd.DataFrame):
        frame = rows if limit is None else rows.head(limit)
        return [dict(r) for r in frame.to_dict(orient="records")]
    records = [dict(r) for r in rows]
    return records if limit is None else records[:limit]
