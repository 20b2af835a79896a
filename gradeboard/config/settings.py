from dataclasses import dataclass
import os
from dotenv import load_dotenv


load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    web_mode: bool = _flag("GRADEBOARD_WEB", "0")
    port: int = int(os.getenv("PORT", "8550"))
    seed_samples: bool = _flag("GRADEBOARD_SEED_SAMPLES", "1")
    log_level: str = os.getenv("GRADEBOARD_LOG_LEVEL", "INFO").upper()

    clock_interval: float = float(os.getenv("GRADEBOARD_CLOCK_INTERVAL", "1.0"))
    banner_interval: float = float(os.getenv("GRADEBOARD_BANNER_INTERVAL", "3.0"))

    complement_fail_pct: bool = _flag("GRADEBOARD_COMPLEMENT_FAIL_PCT", "1")


settings = Settings()
