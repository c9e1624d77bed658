from typing import Dict, Type

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from summarize_ai.ai.errors import (
    ConfigurationError,
    GenerationError,
    ProviderError,
    SummarizationError,
    SummaryInProgressError,
    SummaryTimeoutError,
    SummaryValidationError,
    UnsupportedOptionError,
)
from summarize_ai.core.logger import get_logger

logger = get_logger(__name__)

ERROR_STATUS: Dict[Type[SummarizationError], int] = {
    SummaryValidationError: status.HTTP_400_BAD_REQUEST,
    UnsupportedOptionError: status.HTTP_400_BAD_REQUEST,
    SummaryInProgressError: status.HTTP_409_CONFLICT,
    ProviderError: status.HTTP_502_BAD_GATEWAY,
    GenerationError: status.HTTP_502_BAD_GATEWAY,
    ConfigurationError: status.HTTP_503_SERVICE_UNAVAILABLE,
    SummaryTimeoutError: status.HTTP_504_GATEWAY_TIMEOUT,
}


def status_for(exc: SummarizationError) -> int:
    for exc_type in type(exc).__mro__:
        if exc_type in ERROR_STATUS:
            return ERROR_STATUS[exc_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def summarization_error_handler(request: Request, exc: SummarizationError) -> JSONResponse:
    code = status_for(exc)
    if code >= 500:
        logger.error("Summarization failed on %s: %s", request.url.path, exc)
    else:
        logger.info("Summarization rejected on %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=code,
        content={"detail": str(exc), "error": exc.code},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SummarizationError, summarization_error_handler)
