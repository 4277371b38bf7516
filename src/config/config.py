import os
from dataclasses import dataclass
from typing import Optional

from utils.load_secrets import load_env_vars


def _optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name, "").strip()
    return float(raw) if raw else None


def _flag(name: str) -> bool:
    return os.getenv(name, "false").strip().lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class Settings:
    store_path: str
    latency_scale: float
    location_timeout: float
    user_lat: Optional[float]
    user_lng: Optional[float]
    location_denied: bool
    log_level: str

    def __init__(self):
        load_env_vars()
        object.__setattr__(
            self,
            "store_path",
            os.getenv("BOOKSWAP_STORE_PATH", ".bookswap/store.json").strip(),
        )
        object.__setattr__(
            self,
            "latency_scale",
            float(os.getenv("BOOKSWAP_LATENCY_SCALE", "0.001").strip()),
        )
        object.__setattr__(
            self,
            "location_timeout",
            float(os.getenv("BOOKSWAP_LOCATION_TIMEOUT", "8").strip()),
        )
        object.__setattr__(self, "user_lat", _optional_float("BOOKSWAP_USER_LAT"))
        object.__setattr__(self, "user_lng", _optional_float("BOOKSWAP_USER_LNG"))
        object.__setattr__(
            self, "location_denied", _flag("BOOKSWAP_LOCATION_DENIED")
        )
        object.__setattr__(
            self, "log_level", os.getenv("BOOKSWAP_LOG_LEVEL", "INFO").strip().upper()
        )


SETTINGS = Settings()
