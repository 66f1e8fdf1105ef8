import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from course_ta.core.config import get_settings
from course_ta.core.database import Database
from course_ta.core.errors import AppError
from course_ta.core.logging import setup_logging
from course_ta.routers import chat, context, feedback, history, models, modules
from course_ta.services.conversation import ConversationOrchestrator
from course_ta.services.llm.registry import get_provider, supports_temperature
from course_ta.services.rag.retriever import CourseRetriever

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: build the shared collaborators once and hang them on app.state
    settings = get_settings()
    database = Database(settings.database_url, pool_pre_ping=True)
    provider, api_model = get_provider(settings.openai_model)
    if not supports_temperature(settings.openai_model):
        logger.warning(
            "Model %s ignores TEMPERATURE=%s; sampling uses the API default",
            settings.openai_model, settings.temperature,
        )

    app.state.database = database
    app.state.orchestrator = ConversationOrchestrator(
        settings=settings,
        retriever=CourseRetriever(settings),
        provider=provider,
        api_model=api_model,
    )
    logger.info(
        "Course TA ready (model=%s, index=%s)",
        settings.openai_model, settings.vector_index_name,
    )
    yield
    # Shutdown: release pooled connections
    await database.dispose()


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Invalid request body for %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level, use_rich=settings.log_rich)

    app = FastAPI(
        title="Course TA API",
        description="Course-grounded teaching assistant chat",
        version="1.0.0",
        lifespan=lifespan,
    )
    # Avoid 307 redirects for trailing slash (e.g. /chat/ -> /chat)
    app.router.redirect_slashes = False

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.frontend_url,
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(chat.router, prefix="/chat", tags=["Chat"])
    app.include_router(history.router, prefix="/chat-history", tags=["Chat History"])
    app.include_router(feedback.router, prefix="/rate-message", tags=["Feedback"])
    app.include_router(context.router, prefix="/set-context", tags=["Context"])
    app.include_router(modules.router, prefix="/modules", tags=["Modules"])
    app.include_router(models.router, prefix="/models", tags=["Models"])

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    return app


app = create_app()
