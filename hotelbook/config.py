import logging
import os
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseModel):
    database_url: str = "hotel.db"
    log_level: str = "INFO"
    obs_on: bool = True
    static_dir: str = str(PACKAGE_DIR / "static")

    @property
    def sqlalchemy_url(self) -> str:
        """Bare paths (the default) become SQLite URLs."""
        if "://" in self.database_url:
            return self.database_url
        return f"sqlite:///{self.database_url}"


def get_settings(env_file: Optional[str] = None) -> Settings:
    # real environment wins over .env
    load_dotenv(env_file, override=False)
    return Settings(
        database_url=os.getenv("DATABASE_URL") or "hotel.db",
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        obs_on=os.getenv("OBS_ON", "on") == "on",
        static_dir=os.getenv("STATIC_DIR") or str(PACKAGE_DIR / "static"),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
