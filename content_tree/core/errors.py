"""Error taxonomy for the content tree services.

Services raise these exceptions; ``register_exception_handlers`` turns them
into ``{"success": false, "errors": [{"msg": ...}]}`` responses.
"""

from typing import Iterable, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class ContentTreeError(Exception):
    """Base class for every error surfaced to API callers"""

    status_code = 500

    def __init__(self, *messages: str):
        self.messages: List[str] = list(messages) or [self.__class__.__name__]
        super().__init__("; ".join(self.messages))


class InvalidInput(ContentTreeError):
    """Malformed or missing fields, one message per violated field"""

    status_code = 400


class Unauthenticated(ContentTreeError):
    status_code = 401


class Forbidden(ContentTreeError):
    status_code = 403


class NotFound(ContentTreeError):
    status_code = 404


class Conflict(ContentTreeError):
    status_code = 409


class StorageError(ContentTreeError):
    """Document store failure; aborts the current operation"""

    status_code = 503


def _format_error_entries(entries: Iterable[dict]) -> List[str]:
    messages = []
    for entry in entries:
        location = [str(part) for part in entry.get("loc", ()) if part != "body"]
        field = ".".join(location) or "body"
        messages.append(f"{field}: {entry.get('msg', 'invalid value')}")
    return messages


def error_response(status_code: int, messages: List[str]) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "errors": [{"msg": msg} for msg in messages]},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Map the error taxonomy onto HTTP responses"""

    @app.exception_handler(ContentTreeError)
    async def handle_content_tree_error(request: Request, exc: ContentTreeError):
        headers = None
        if isinstance(exc, Unauthenticated):
            headers = {"WWW-Authenticate": "Bearer"}
        response = error_response(exc.status_code, exc.messages)
        if headers:
            response.headers.update(headers)
        return response

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        request: Request, exc: RequestValidationError
    ):
        return error_response(
            InvalidInput.status_code, _format_error_entries(exc.errors())
        )
