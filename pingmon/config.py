import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DEFAULT_TARGETS_PATH = Path(__file__).resolve().parents[1] / "targets.yml"


class Settings:
    PINGMON_HOST: str = os.getenv("PINGMON_HOST", "0.0.0.0")
    PINGMON_PORT: int = int(os.getenv("PINGMON_PORT", 8080))
    PINGMON_INTERVAL_S: float = float(os.getenv("PINGMON_INTERVAL_S", "120"))
    PINGMON_TIMEOUT_S: float = float(os.getenv("PINGMON_TIMEOUT_S", "5"))
    PINGMON_TARGETS: tuple[str, ...] = tuple(
        target.strip()
        for target in os.getenv("PINGMON_TARGETS", "").split(",")
        if target.strip()
    )
    PINGMON_TARGETS_PATH: str = os.getenv(
        "PINGMON_TARGETS_PATH", str(DEFAULT_TARGETS_PATH)
    )
    PINGMON_LOG_LEVEL: str = os.getenv("PINGMON_LOG_LEVEL", "INFO").upper()


settings = Settings()
