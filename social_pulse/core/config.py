from typing import List
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator

# Get the project root directory path
BASE_DIR = Path(__file__).resolve().parent.parent.parent
ENV_FILE = BASE_DIR / ".env"


DEFAULT_CHAT_SYSTEM_INSTRUCTION = (
    "You are Caramel AI, a friendly and helpful AI assistant for the Social Pulse application. "
    "You work for HERE AND NOW AI. Your goal is to assist users in understanding social media "
    "sentiment analysis results and provide insightful marketing recommendations or answer general "
    "questions related to social media marketing. Be concise and professional. If asked about current "
    "events or specific data you don't have, use Google Search grounding if appropriate. Always cite "
    "your sources if you use Google Search."
)


class Settings(BaseSettings):
    """Application settings and configuration - loads from .env file"""

    # Application
    APP_NAME: str = "Social Pulse"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = ["*"]

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str):
            return [i.strip() for i in v.split(",")]
        return v

    # Google Gemini API (empty key switches the services to demo/mock mode)
    GOOGLE_API_KEY: str = ""
    GEMINI_TEXT_MODEL: str = "gemini-2.5-flash"
    GEMINI_TEMPERATURE: float = 0.2

    # Batch analysis
    MAX_BATCH_TEXTS: int = 100

    # Chatbot
    CHAT_SYSTEM_INSTRUCTION: str = DEFAULT_CHAT_SYSTEM_INSTRUCTION

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="allow"
    )


settings = Settings()

# Debug: Print loaded config on import
if settings.DEBUG:
    print(f"✅ Loaded .env from: {ENV_FILE}")
    print(f"   GEMINI_TEXT_MODEL: {settings.GEMINI_TEXT_MODEL}")
    print(f"   GOOGLE_API_KEY set: {bool(settings.GOOGLE_API_KEY)}")
    print(f"   CORS_ORIGINS: {settings.BACKEND_CORS_ORIGINS}")
