import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from social_pulse.core.config import settings
from social_pulse.routers import health, sentiment, chat


logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("social_pulse")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan event handler"""
    # Startup
    logger.info(f"Starting {settings.APP_NAME} API...")
    if not settings.GOOGLE_API_KEY:
        logger.warning("GOOGLE_API_KEY not set. Sentiment analysis returns mock data and the chatbot runs in demo mode.")
    else:
        logger.info(f"Using Gemini model {settings.GEMINI_TEXT_MODEL}")

    yield
    # Shutdown
    logger.info(f"Shutting down {settings.APP_NAME} API...")


# Main FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Social Pulse - Social media sentiment, emotion and keyword analysis powered by Gemini",
    lifespan=lifespan,
    docs_url=None,  # Disable main app docs
    redoc_url=None,
    openapi_url=None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# API v1 routes with Swagger at /docs
api_v1 = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Social Pulse API | Batch sentiment analysis and Caramel AI chatbot",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=[
        {"name": "Health", "description": "Service health checks"},
        {"name": "Sentiment Analysis", "description": "Batch sentiment, emotion, keyword and language analysis"},
        {"name": "Chatbot", "description": "Caramel AI assistant with Google Search grounding"},
    ],
    swagger_ui_parameters={
        "displayRequestDuration": True,
    },
)

# Include routers in v1
api_v1.include_router(health.router)
api_v1.include_router(sentiment.router)
api_v1.include_router(chat.router)

# Mount v1 API at root level (so /docs works directly)
app.mount("", api_v1)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info",
    )
