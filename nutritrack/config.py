from __future__ import annotations

import os
from pathlib import Path
from typing import List


class Settings:
    """Centralized configuration for the tracking API."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        data_root_default = base_dir.parent / "data"

        self.data_root: Path = Path(
            os.environ.get("NUTRITRACK_DATA_ROOT") or data_root_default
        ).expanduser()
        # "memory" keeps everything in-process; "sqlite" writes to db_path.
        self.storage_backend: str = (
            os.environ.get("NUTRITRACK_STORAGE") or "memory"
        ).strip().lower()
        self.db_path: Path = Path(
            os.environ.get("NUTRITRACK_DB_PATH") or (self.data_root / "nutritrack.db")
        ).expanduser()

        self.gemini_api_key: str | None = os.environ.get("GEMINI_API_KEY") or None
        self.gemini_base_url: str = os.environ.get(
            "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta"
        )
        self.gemini_model: str = os.environ.get("GEMINI_MODEL", "gemini-2.5-flash")
        self.gemini_timeout: float = float(os.environ.get("GEMINI_TIMEOUT", "30"))

        self.default_weight_kg: float = float(
            os.environ.get("NUTRITRACK_DEFAULT_WEIGHT_KG") or "70"
        )
        self.log_level: str = (os.environ.get("NUTRITRACK_LOG_LEVEL") or "INFO").upper()
        self.host: str = os.environ.get("NUTRITRACK_HOST") or os.environ.get("HOST") or "127.0.0.1"
        self.port_raw: str = os.environ.get("NUTRITRACK_PORT") or os.environ.get("PORT") or "8000"

        cors = os.environ.get("NUTRITRACK_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


settings = Settings()
