"""Runtime settings for the Study Helper backend.

Values come from environment variables, with a `.env` file in the project
root loaded first (existing environment variables win).
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
load_dotenv(_PROJECT_ROOT / ".env", override=False)

MAX_UPLOAD_BYTES = 10 * 1024 * 1024


@dataclass
class Settings:
    gemini_api_key: str = field(
        default_factory=lambda: os.environ.get("GEMINI_API_KEY", "").strip()
    )
    gemini_model: str = field(
        default_factory=lambda: os.environ.get("GEMINI_MODEL", "gemini-2.0-flash").strip()
    )
    db_path: Path = field(default_factory=lambda: Path(os.environ.get("DB_PATH", "./study.db")))
    host: str = field(default_factory=lambda: os.environ.get("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.environ.get("PORT", "3000")))
    cors_origins: list[str] = field(
        default_factory=lambda: [
            o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()
        ]
    )
    frontend_dir: Path = field(
        default_factory=lambda: Path(os.environ.get("FRONTEND_DIR", _PROJECT_ROOT / "frontend"))
    )

    @property
    def database_url(self) -> str:
        """SQLAlchemy URL for the SQLite notes database."""
        return f"sqlite:///{self.db_path}"


settings = Settings()
