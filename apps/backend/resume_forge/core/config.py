import os
import sys
import logging
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional, Literal


_BACKEND_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir, os.pardir))
_DEFAULT_STORE_PATH = os.path.join(_BACKEND_ROOT, ".store")


class Settings(BaseSettings):
    # The defaults here provide a fully working local configuration so new
    # contributors can run the stack without editing environment variables.
    PROJECT_NAME: str = "Resume Forge"
    ENV: str = "local"
    HOST: str = "127.0.0.1"
    PORT: int = 8000
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]
    LLM_PROVIDER: Optional[str] = "ollama"
    LLM_API_KEY: Optional[str] = None
    LLM_BASE_URL: Optional[str] = "http://localhost:11434"
    LL_MODEL: Optional[str] = "llama3.1"
    LLM_TEMPERATURE: float = 0.2
    LLM_MAX_TOKENS: int = 4096
    LLM_TIMEOUT_SECONDS: int = 120
    # Master profile persistence: "file" (JSON files under STORE_PATH) or "memory"
    STORE_BACKEND: Literal["file", "memory"] = "file"
    STORE_PATH: str = _DEFAULT_STORE_PATH
    MASTER_PROFILE_KEY: str = "master-profile"
    # Inputs longer than this are truncated before they reach the model
    MAX_PARSE_INPUT_CHARS: int = 10_000
    MAX_JOB_DESCRIPTION_CHARS: int = 5_000
    MAX_CHAT_JOB_DESCRIPTION_CHARS: int = 3_000
    MAX_CHAT_BIO_CHARS: int = 2_000
    MAX_CHAT_HISTORY: int = 8
    MAX_UPLOAD_BYTES: int = 2 * 1024 * 1024

    model_config = SettingsConfigDict(
        env_file=os.path.join(_BACKEND_ROOT, ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()


_LEVEL_BY_ENV: dict[Literal["production", "staging", "local"], int] = {
    "production": logging.INFO,
    "staging": logging.DEBUG,
    "local": logging.DEBUG,
}


def setup_logging() -> None:
    """
    Configure the root logger exactly once,

    * Console only (StreamHandler -> stderr)
    * ISO - 8601 timestamps
    * Env - based log level: production -> INFO, else DEBUG
    * Prevents duplicate handler creation if called twice
    """
    root = logging.getLogger()
    if root.handlers:
        return

    level = _LEVEL_BY_ENV.get(settings.ENV.lower(), logging.INFO)

    formatter = logging.Formatter(
        fmt="[%(asctime)s - %(name)s - %(levelname)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root.setLevel(level)
    root.addHandler(handler)

    for noisy in ("uvicorn.access", "aiohttp.access", "pdfminer"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
