# fasal/config.py
import os
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()

def _optional_int(name: str) -> int | None:
    raw = os.getenv(name)
    return int(raw) if raw not in (None, "") else None

class Settings(BaseModel):
    # 🌦️ Location / weather lookups
    openweather_api_key: str = os.getenv("OPENWEATHER_API_KEY", "")
    fetch_timeout_s: float = float(os.getenv("FETCH_TIMEOUT_S", "8"))

    # 🤖 LLM (chat assistant)
    openai_api_key: str = os.getenv("OPENAI_API_KEY", "")
    openai_model: str = os.getenv("OPENAI_MODEL", "gpt-4o-mini")

    # Ranking
    top_n: int = int(os.getenv("TOP_N", "5"))
    score_jitter: float = float(os.getenv("SCORE_JITTER", "0.0"))  # 0 disables
    jitter_seed: int | None = _optional_int("JITTER_SEED")

    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    cors_origins: list[str] = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

settings = Settings()
