"""JSON responses: 2-space indented bodies and the error envelope."""

import json
from typing import Any

from fastapi.responses import JSONResponse


class PrettyJSONResponse(JSONResponse):
    def render(self, content: Any) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=False,
            allow_nan=False,
            indent=2,
        ).encode("utf-8")


def error_response(status_code: int, message: str) -> PrettyJSONResponse:
    """{"error": true, "message": ..., "status": ...}"""
    return PrettyJSONResponse(
        status_code=status_code,
        content={"error": True, "message": message, "status": status_code},
    )
