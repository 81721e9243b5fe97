from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from pydantic import BaseModel, Field


def set_custom_openapi(app: FastAPI) -> None:
    def custom_openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema

        openapi_schema = get_openapi(
            title="Wiki Discussion API",
            version="0.1.0",
            summary="Discussion threads and recent comments of a wiki",
            routes=app.routes,
        )

        # The caller is identified by the reverse proxy, not by the API itself
        openapi_schema.setdefault("components", {})["securitySchemes"] = {
            "RemoteUser": {
                "type": "apiKey",
                "in": "header",
                "name": "X-Remote-User",
                "description": "User name set by the trusted reverse proxy (optional, anonymous otherwise)",
            },
        }

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
                {"message": "Page 'wiki:start' not found", "type": "not_found"},
                {"message": "Access denied: page 'private:notes'", "type": "access_denied"},
                {"message": "Invalid page id: '../etc'", "type": "validation_error"},
            ]
        }
    }
