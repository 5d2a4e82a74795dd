"""Convert database results into JSON/YAML friendly values."""

import base64
import re
import uuid
from datetime import datetime
from decimal import Decimal
from typing import Any

from bson import Binary, Decimal128, ObjectId, Regex, Timestamp, json_util


def _to_plain(value: Any) -> Any:
    """Map BSON and driver types onto str, int, float, bool, None, list and dict.

    Decimals become strings so prices keep their exact digits; binary data
    becomes base64; regular expressions become their pattern.
    """
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, dict):
        return {str(k): _to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_plain(v) for v in value]
    # Int64, Code and other subclasses collapse to the plain builtin
    if isinstance(value, str):
        return str(value)
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        return float(value)
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Decimal128):
        return str(value.to_decimal())
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, uuid.UUID):
        return str(value)
    if isinstance(value, (Binary, bytes)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, (Regex, re.Pattern)):
        return value.pattern
    if isinstance(value, Timestamp):
        return {"t": value.time, "i": value.inc}
    try:
        # DBRef, MinKey, MaxKey and friends in extended JSON form
        return _to_plain(json_util.default(value))
    except TypeError:
        return str(value)
