from fastapi import FastAPI, status
from fastapi.responses import RedirectResponse

from summarize_ai.core.config import settings
from summarize_ai.core.logger import configure_logging, get_logger

# Configure logging
configure_logging()
logger = get_logger(__name__)

from summarize_ai.ai.client import SummarizationClient
from summarize_ai.ai.errors import ConfigurationError
from summarize_ai.api.error_handlers import register_exception_handlers
from summarize_ai.api.summary_router import SummaryRouter
from summarize_ai.web.router import web_router


summary_router = SummaryRouter()

app = FastAPI(
    title=settings.PROJECT_NAME,
    debug=settings.DEBUG,
)
app.state.summarization_client = None

register_exception_handlers(app)

app.include_router(summary_router.router, prefix="/api/v1")
app.include_router(web_router)


@app.on_event("startup")
async def on_startup():
    if app.state.summarization_client is not None:
        return
    try:
        app.state.summarization_client = SummarizationClient.from_settings(settings)
    except ConfigurationError as e:
        # App still serves the UI; summarize calls answer 503 until configured
        logger.error("Summarization client not configured: %s", e)
        return
    logger.info("Summarization client configured (provider=%s)", settings.SUMMARIZER_PROVIDER)


@app.get("/health")
async def health_check():
    return {"status": "ok"}


@app.get("/")
async def root():
    return RedirectResponse(url="/web/", status_code=status.HTTP_302_FOUND)
