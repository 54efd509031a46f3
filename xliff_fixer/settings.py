import os
from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()  # load .env

class _Settings(BaseSettings):
    # OpenAI
    openai_api_key: str = os.getenv("OPENAI_API_KEY", "")
    ai_model: str = "gpt-4.1-mini"
    ai_temperature: float = 0.1       # low temperature for structural fixes
    ai_timeout_seconds: float = 120.0

    # Upload constraints
    max_file_size: int = 5 * 1024 * 1024
    allowed_extensions: tuple[str, ...] = (".xlf", ".xliff", ".xml")

    # Runtime
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = False

settings = _Settings()           # singleton
