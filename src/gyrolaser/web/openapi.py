from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from pydantic import BaseModel, Field

API_VERSION = "0.1.0"


def set_custom_openapi(app: FastAPI) -> None:
    def custom_openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema

        openapi_schema = get_openapi(
            title="GyroLaser API",
            version=API_VERSION,
            summary="Session registry for pairing presenter screens with phone controllers",
            routes=app.routes,
        )

        # Sessions are public; no endpoint requires credentials
        openapi_schema["security"] = []

        app.openapi_schema = openapi_schema
        return app.openapi_schema

    app.openapi = custom_openapi  # type: ignore[method-assign]


class ErrorResponse(BaseModel):
    """Standard error response format."""

    message: str = Field(..., description="Human-readable error message")
    type: str = Field(..., description="Machine-readable error type")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"message": "Session 'A3X9K2' not found", "type": "not_found"},
                {"message": "Invalid room ID 'abc'", "type": "validation_error"},
            ]
        }
    }
