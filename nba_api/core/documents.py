"""Document Encoding — BSON documents to JSON-compatible values, field-for-field.

Invariants:
    - No field added, renamed, dropped or reordered
    - ObjectId → 24-char hex, datetime → ISO-8601 in UTC, Decimal128 → str, bytes → base64
    - NaN and ±inf → null (what JSON.stringify emits), so JSONResponse never rejects a document
    - Remaining BSON types (Timestamp, Regex, DBRef, Code, MinKey, MaxKey) → relaxed Extended JSON

Design Decisions:
    - jsonable_encoder with custom_encoder: FastAPI already walks dicts/lists,
      only the scalars need mapping
    - Naive datetimes are read as UTC: that is what BSON dates are
"""

import base64
import math
import re
from datetime import datetime, timezone
from typing import Any

from bson import (
    DBRef, Code, Decimal128, MaxKey, MinKey, ObjectId, Regex, Timestamp,
    json_util,
)
from fastapi.encoders import jsonable_encoder


def _encode_float(value: float) -> float | None:
    return value if math.isfinite(value) else None


def _encode_datetime(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


def _extended_json(value: Any) -> Any:
    return json_util.default(value, json_options=json_util.RELAXED_JSON_OPTIONS)


_BSON_ENCODERS = {
    float: _encode_float,
    datetime: _encode_datetime,
    ObjectId: str,
    Decimal128: str,
    bytes: lambda b: base64.b64encode(b).decode("ascii"),
    Timestamp: _extended_json,
    Regex: _extended_json,
    re.Pattern: _extended_json,
    DBRef: _extended_json,
    Code: _extended_json,
    MinKey: _extended_json,
    MaxKey: _extended_json,
}


def encode_documents(documents: list[dict[str, Any]]) -> list[dict[str, Any]]:
    return jsonable_encoder(documents, custom_encoder=_BSON_ENCODERS)
