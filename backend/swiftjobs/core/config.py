from functools import lru_cache
from pydantic_settings import BaseSettings
from typing import Dict, Any, List, Optional


class Settings(BaseSettings):
    ENV: str = "local"
    DEBUG: bool = True
    APP_NAME: str = "Swift Jobs"
    API_PREFIX: str = "/api"
    DATABASE_URL: str
    GROQ_API_KEY: Optional[str] = None
    OPENAI_API_KEY: Optional[str] = None
    ANTHROPIC_API_KEY: Optional[str] = None
    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: List[str] = ["*"]

    # File upload settings
    RESUME_UPLOAD_DIR: str = "uploads/resumes"
    MAX_UPLOAD_SIZE_MB: int = 10
    ALLOWED_RESUME_MIME_TYPES: list = [
        "application/pdf",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
    ]

    # Matching
    MATCH_SCORE_THRESHOLD: int = 75  # Seeker-side matches below this are hidden
    DEFAULT_MATCH_SCORE: int = 70  # Used when the LLM reply carries no usable score
    MAX_CONCURRENT_LLM_CALLS: int = 8

    PASSWORD_HASH_ITERATIONS: int = 100_000

    llm_config: Dict[str, Any] = {
        "provider": "groq",
        "model": "llama-3.3-70b-versatile",
        "temperature": 0.5,
        "max_tokens": 1500
    }

    class Config:
        env_file = ".env"
        case_sensitive = True

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        if self.ENV in ["local", "dev"]:
            self.DEBUG = True

    def provider_api_key(self, provider: str) -> Optional[str]:
        """Return the configured API key for an LLM provider."""
        return {
            "groq": self.GROQ_API_KEY,
            "openai": self.OPENAI_API_KEY,
            "anthropic": self.ANTHROPIC_API_KEY,
        }.get(provider.lower())


@lru_cache()
def get_settings() -> Settings:
    return Settings()

# Create global settings instance
settings = get_settings()
