"""Problem responses (RFC 7807) and the handlers that produce them."""

from typing import Any

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from thanks.application.binder import Violation
from thanks.domain.error import RepositoryError
from thanks.interface.error import Problem
from thanks.util.messages import Messages

PROBLEM_MEDIA_TYPE = "application/problem+json"


def problem_body(problem: Problem, type_url: str) -> dict[str, Any]:
    """Serialize a problem; ``invalid-params`` only appears when non-empty."""
    body: dict[str, Any] = {
        "type": type_url,
        "title": problem.title,
        "status": problem.status,
    }
    if problem.violations:
        body["invalid-params"] = [v.to_dict() for v in problem.violations]
    return body


def _location(loc: tuple) -> str:
    # ("body", "thanked", 0) -> "thanked.0"; ("query", "limit") -> "limit"
    parts = [str(part) for part in loc[1:]] or [str(loc[0])]
    return ".".join(parts)


def install_problem_handlers(app: FastAPI, type_url: str, messages: Messages) -> None:
    """Register the exception handlers that answer with problem bodies.

    Args:
        app: FastAPI application
        type_url: Value of the ``type`` member of every problem
        messages: Message catalogue for titles
    """

    @app.exception_handler(Problem)
    async def handle_problem(request: Request, exc: Problem) -> JSONResponse:
        return JSONResponse(
            problem_body(exc, type_url),
            status_code=exc.status,
            media_type=PROBLEM_MEDIA_TYPE,
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        # Malformed JSON, a missing or non-object body, or bad query parameters
        errors = exc.errors()
        body_error = any(error["loc"] and error["loc"][0] == "body" for error in errors)
        logfire.info(
            "Request rejected before binding",
            path=request.url.path,
            errors=len(errors),
        )
        problem = Problem(
            status.HTTP_400_BAD_REQUEST,
            messages("error.invalid_body" if body_error else "error.invalid_request"),
            [
                Violation(name=_location(tuple(error["loc"])), reason=error["msg"])
                for error in errors
            ],
        )
        return JSONResponse(
            problem_body(problem, type_url),
            status_code=problem.status,
            media_type=PROBLEM_MEDIA_TYPE,
        )

    @app.exception_handler(RepositoryError)
    async def handle_repository_error(
        request: Request, exc: RepositoryError
    ) -> JSONResponse:
        # Raised outside a route's own handling, e.g. while loading feature flags
        logfire.error(
            "Storage failure",
            method=request.method,
            path=request.url.path,
            error=str(exc),
        )
        problem = Problem(
            status.HTTP_500_INTERNAL_SERVER_ERROR, messages("error.server")
        )
        return JSONResponse(
            problem_body(problem, type_url),
            status_code=problem.status,
            media_type=PROBLEM_MEDIA_TYPE,
        )
