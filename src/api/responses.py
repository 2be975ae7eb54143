from typing import Any, Optional
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class ApiResponse(BaseModel):
    statusCode: int
    data: Optional[Any] = None
    message: str = "Success"


def camelize(value: Any) -> Any:
    """Recursively renames dict keys from snake_case to camelCase."""
    if isinstance(value, dict):
        return {to_camel(k) if isinstance(k, str) else k: camelize(v) for k, v in value.items()}
    if isinstance(value, list):
        return [camelize(v) for v in value]
    return value


def envelope(status_code: int, data: Any = None, message: str = "Success") -> JSONResponse:
    """
    Wraps a payload into the {statusCode, data, message} envelope used by every route.
    Payload keys go out in camelCase.
    """
    body = ApiResponse(statusCode=status_code, data=camelize(jsonable_encoder(data)), message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())
