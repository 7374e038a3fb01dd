"""
Application configuration using Pydantic-Settings.
All settings can be overridden via environment variables or .env file.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Database ──────────────────────────────────────────────────────────
    DATABASE_URL: str = "sqlite:///./emu_log.db"

    # ── Providers ─────────────────────────────────────────────────────────
    SHANGHAI_API_URL: str = "https://g.xiuxiu365.cn/railway_api/web/index/train"
    BEIJING_API_URL: str = "https://aymaoto.jtlf.cn/webapi/otoshopping/ewh_getqrcodetrainnoinfo"
    BEIJING_SIGN_KEY: str = "ltRsjkiM8IRbC80Ni1jzU5jiO6pJvbKd"
    HTTP_TIMEOUT_SECONDS: float = 5.0
    REQUEST_DELAY_SECONDS: float = 4.0     # Pause before every provider call

    # ── Schedule ──────────────────────────────────────────────────────────
    WINDOW_START_HOUR: int = 5             # Active window is [start, end) local time
    WINDOW_END_HOUR: int = 24
    REPEAT_INTERVAL_MINUTES: int = 60

    # ── Startup checks ────────────────────────────────────────────────────
    EXPECTED_UTC_OFFSET_HOURS: int = 8     # Beijing time
    PROBE_SCAN_CODE: str = "PQ0123456"

    # ── Logging ───────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
