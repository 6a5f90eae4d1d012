import os
from typing import List, Optional

from dotenv import load_dotenv

# Load .env from the backend directory
load_dotenv(os.path.join(os.path.dirname(__file__), "..", "..", ".env"))

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
BACKEND_DIR = os.path.abspath(os.path.join(BASE_DIR, "..", ".."))

# Database lives in backend/data/ unless overridden
DATABASE_PATH: str = os.getenv(
    "DATABASE_PATH",
    os.path.join(BACKEND_DIR, "data", "wordquiz.db"),
)
MIGRATIONS_DIR: str = os.path.join(BACKEND_DIR, "migrations")

# Tokens are issued by the external identity provider; we only verify them.
AUTH_JWT_SECRET: str = os.getenv("AUTH_JWT_SECRET", "wordquiz-dev-secret-change-in-prod")
AUTH_JWT_ALGORITHM: str = os.getenv("AUTH_JWT_ALGORITHM", "HS256")
AUTH_JWT_AUDIENCE: Optional[str] = os.getenv("AUTH_JWT_AUDIENCE") or None

# AI word generation (any OpenAI-compatible chat completions endpoint)
AI_API_URL: str = os.getenv("AI_API_URL", "https://api.openai.com/v1/chat/completions")
AI_API_KEY: str = os.getenv("AI_API_KEY", "").strip()
AI_MODEL: str = os.getenv("AI_MODEL", "gpt-4o-mini")
AI_TIMEOUT_SECONDS: float = float(os.getenv("AI_TIMEOUT_SECONDS", "30"))

# Weight policy
DEFAULT_WEIGHT: int = int(os.getenv("DEFAULT_WEIGHT", "1"))
SCORE_INCREMENT: int = int(os.getenv("SCORE_INCREMENT", "1"))
SCORE_DECREMENT: int = int(os.getenv("SCORE_DECREMENT", "1"))
WEIGHT_FLOOR: int = int(os.getenv("WEIGHT_FLOOR", "1"))
SCORE_INIT_CHUNK_SIZE: int = int(os.getenv("SCORE_INIT_CHUNK_SIZE", "100"))

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
CORS_ORIGINS: List[str] = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
