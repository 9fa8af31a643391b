from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from typing import Optional, Any
from pydantic import BaseModel


def build_response(
    status_code: int,
    success: bool = True,
    message: str = None,
    data: Any = None,
    error: Optional[str] = None,
) -> JSONResponse:
    response = {"success": success}

    if data is not None:
        # If data is a Pydantic model, convert it to a dictionary
        if isinstance(data, BaseModel):
            response["data"] = data.model_dump(mode="json")
        # If data is a list of Pydantic models, convert each to a dictionary
        elif isinstance(data, list) and all(isinstance(item, BaseModel) for item in data):
            response["data"] = [item.model_dump(mode="json") for item in data]
        else:
            # datetimes, dates and enums nested in plain dicts
            response["data"] = jsonable_encoder(data)

    if error is not None:
        response["error"] = error

    if message is not None:
        response["message"] = message

    return JSONResponse(
        content=response,
        status_code=status_code,
        media_type="application/json"
    )
