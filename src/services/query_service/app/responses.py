# src/services/query_service/app/responses.py
from typing import Any

import simplejson
from fastapi.responses import JSONResponse


class DecimalJSONResponse(JSONResponse):
    """
    JSONResponse that writes Decimal values as bare JSON numbers using their
    exact text, so Decimal("35.50") goes out as 35.50 rather than 35.5 or "35.50".
    """

    def render(self, content: Any) -> bytes:
        return simplejson.dumps(
            content,
            use_decimal=True,
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ":"),
        ).encode("utf-8")
