import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.exceptions import DomainException, RepositoryException, is_db_pool_exhaustion

logger = logging.getLogger(__name__)

PROBLEM_MEDIA_TYPE = "application/problem+json"


def _title_from_status(status_code: int) -> str:
    mapping = {
        400: "Bad Request",
        404: "Not Found",
        405: "Method Not Allowed",
        422: "Unprocessable Entity",
        500: "Internal Server Error",
        503: "Service Unavailable",
    }
    return mapping.get(status_code, "Error")


def _problem(
    *,
    status: int,
    title: Optional[str] = None,
    detail: Optional[str] = None,
    instance: Optional[str] = None,
    type_: str = "about:blank",
    code: Optional[str] = None,
    errors: Optional[Any] = None,
) -> Dict[str, Any]:
    problem: Dict[str, Any] = {
        "type": type_,
        "title": title or _title_from_status(status),
        "status": status,
        "detail": detail or "",
        "instance": instance or "",
    }
    if code:
        problem["code"] = code
    if errors is not None:
        problem["errors"] = errors
    return problem


def _parse_detail(detail: Any) -> tuple[Optional[str], Optional[str], Optional[Any]]:
    if isinstance(detail, dict):
        code = detail.get("code") if isinstance(detail.get("code"), str) else None
        message = detail.get("message") or detail.get("detail")
        detail_text = message if isinstance(message, str) else None
        errors = detail.get("details") or detail.get("errors")
        return detail_text, code, errors
    if isinstance(detail, str):
        return detail, None, None
    if detail is None:
        return None, None, None
    return str(detail), None, None


def _http_problem_response(request: Request, status_code: int, detail: Any, headers=None):
    detail_text, code, errors = _parse_detail(detail)
    problem = _problem(
        status=status_code,
        detail=detail_text,
        instance=request.url.path,
        code=code,
        errors=jsonable_encoder(errors) if errors is not None else None,
    )
    return JSONResponse(
        problem, status_code=status_code, media_type=PROBLEM_MEDIA_TYPE, headers=headers
    )


def _validation_problem_response(request: Request, errors: Any, detail: str) -> JSONResponse:
    problem = _problem(
        status=422,
        detail=detail,
        instance=request.url.path,
        code="validation_error",
        errors=jsonable_encoder(errors),
    )
    return JSONResponse(problem, status_code=422, media_type=PROBLEM_MEDIA_TYPE)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(DomainException)
    async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
        http_exc = exc.to_http_exception()
        if http_exc.status_code >= 500:
            logger.error("Domain error on %s: %s", request.url.path, exc.message)
        details = jsonable_encoder(exc.details) if exc.details else None
        problem = _problem(
            status=http_exc.status_code,
            detail=exc.message,
            instance=request.url.path,
            code=exc.code,
            errors=details,
        )
        if details is not None:
            problem["details"] = details
        return JSONResponse(
            problem, status_code=http_exc.status_code, media_type=PROBLEM_MEDIA_TYPE
        )

    @app.exception_handler(RepositoryException)
    async def repository_exception_handler(
        request: Request, exc: RepositoryException
    ) -> JSONResponse:
        logger.error("Repository error on %s: %s", request.url.path, exc)
        status_code = 503 if is_db_pool_exhaustion(exc) else 500
        problem = _problem(
            status=status_code,
            detail="Profile store unavailable" if status_code == 503 else "Internal Server Error",
            instance=request.url.path,
            code="repository_error",
        )
        return JSONResponse(problem, status_code=status_code, media_type=PROBLEM_MEDIA_TYPE)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        return _http_problem_response(request, exc.status_code, exc.detail, exc.headers)

    @app.exception_handler(StarletteHTTPException)
    async def starlette_http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return _http_problem_response(request, exc.status_code, exc.detail, exc.headers)

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return _validation_problem_response(request, exc.errors(), "Request validation failed")

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(request: Request, exc: ValidationError) -> JSONResponse:
        return _validation_problem_response(request, exc.errors(), "Validation failed")

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s", request.url.path)
        if is_db_pool_exhaustion(exc):
            problem = _problem(
                status=503,
                detail="Service temporarily unavailable",
                instance=request.url.path,
                code="db_pool_exhausted",
            )
            return JSONResponse(problem, status_code=503, media_type=PROBLEM_MEDIA_TYPE)
        problem = _problem(
            status=500,
            detail="Internal Server Error",
            instance=request.url.path,
            code="internal_server_error",
        )
        return JSONResponse(problem, status_code=500, media_type=PROBLEM_MEDIA_TYPE)
