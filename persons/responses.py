from typing import Any

from fastapi import Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from persons.result import Error, ErrorKind, Result

STATUS_CODES = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.STORAGE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(error: Error) -> JSONResponse:
    return JSONResponse({"detail": error.message}, status_code=STATUS_CODES[error.kind])


def to_response(result: Result[Any], status_code: int = status.HTTP_200_OK) -> Response:
    if isinstance(result, Error):
        return error_response(result)
    if result.value is None:
        return Response(status_code=status_code)
    return JSONResponse(jsonable_encoder(result.value), status_code=status_code)
