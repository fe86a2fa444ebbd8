import os
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import model_validator

# config.py лежит в career_guide/core/, корень проекта на два уровня выше
current_file_dir = os.path.dirname(os.path.abspath(__file__))
ROOT_DIR = os.path.dirname(os.path.dirname(current_file_dir))
ENV_PATH = os.path.join(ROOT_DIR, ".env")

SQLITE_FALLBACK_URL = "sqlite+aiosqlite:///./career_guide.db"


class Settings(BaseSettings):
    # База данных
    DB_USER: str | None = None
    DB_PASSWORD: str | None = None
    DB_HOST: str | None = None
    DB_PORT: str | None = None
    DB_NAME: str | None = None

    # Готовая строка подключения (Railway/Render)
    DATABASE_URL: str | None = None
    SQL_ECHO: bool = False

    # Безопасность
    SECRET_KEY: str = "dev_secret_key"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30

    # LLM (Groq, OpenAI-совместимый API)
    GROQ_API_KEY: str | None = None
    GROQ_BASE_URL: str = "https://api.groq.com/openai/v1"
    GROQ_MODEL: str = "llama-3.3-70b-versatile"
    LLM_MAX_TOKENS: int = 4096
    LLM_TIMEOUT_SECONDS: float = 60.0

    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    model_config = SettingsConfigDict(
        env_file=ENV_PATH,
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @model_validator(mode='after')
    def assemble_db_connection(self):
        # 1. Готовый DATABASE_URL из окружения
        if self.DATABASE_URL:
            if self.DATABASE_URL.startswith("postgres://"):
                self.DATABASE_URL = self.DATABASE_URL.replace("postgres://", "postgresql+asyncpg://", 1)
            elif self.DATABASE_URL.startswith("postgresql://"):
                self.DATABASE_URL = self.DATABASE_URL.replace("postgresql://", "postgresql+asyncpg://", 1)
            return self

        # 2. Собираем URL из DB_USER, DB_HOST...
        if self.DB_USER and self.DB_HOST and self.DB_NAME:
            self.DATABASE_URL = (
                f"postgresql+asyncpg://{self.DB_USER}:{self.DB_PASSWORD}@"
                f"{self.DB_HOST}:{self.DB_PORT or '5432'}/{self.DB_NAME}"
            )
            return self

        # 3. Локальная разработка без Postgres
        self.DATABASE_URL = SQLITE_FALLBACK_URL
        return self

    @property
    def llm_configured(self) -> bool:
        return bool(self.GROQ_API_KEY)


settings = Settings()
