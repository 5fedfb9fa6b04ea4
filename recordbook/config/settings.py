from dataclasses import dataclass
import os
from dotenv import load_dotenv


load_dotenv()


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    app_title: str = os.getenv("RECORDBOOK_TITLE", "Student Records")
    web_mode: bool = _env_flag("RECORDBOOK_WEB")
    port: int = int(os.getenv("PORT", "8550"))
    log_level: str = os.getenv("RECORDBOOK_LOG_LEVEL", "INFO").upper()


settings = Settings()
