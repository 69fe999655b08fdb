"""
Configuration module - centralized settings for the skeleton generator.
Uses pydantic-settings to load values from environment variables and .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Pydantic-settings automatically:
    1. Reads from environment variables (highest priority)
    2. Falls back to .env file values
    3. Uses default values if neither exists

    To override, set environment variables:
        export SETTLE_DELAY_MS=600
        export ROW_TOLERANCE_PX=12
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ---------------------------------------------------------------------------
    # APPLICATION SETTINGS
    # ---------------------------------------------------------------------------
    # APP_NAME: Display name shown in API docs
    APP_NAME: str = "Skeletonizer"

    # DEBUG: Forces DEBUG level on the skeletonizer logger
    DEBUG: bool = False

    # LOG_LEVEL: Level for the "skeletonizer" logger hierarchy
    LOG_LEVEL: str = "INFO"

    # ---------------------------------------------------------------------------
    # RENDER SURFACE
    # ---------------------------------------------------------------------------
    # The markup is laid out in a headless page of this size. Geometry
    # read back from the page is relative to this viewport.
    VIEWPORT_WIDTH: int = 800
    VIEWPORT_HEIGHT: int = 600

    # Padding applied to <body> in the render document
    BODY_PADDING_PX: int = 16

    # Styling runtime injected into the render document so utility
    # classes in the input resolve to real geometry
    TAILWIND_CDN_URL: str = "https://cdn.tailwindcss.com"

    # ---------------------------------------------------------------------------
    # ACQUISITION TIMING
    # ---------------------------------------------------------------------------
    # LOAD_TIMEOUT_MS: Upper bound on waiting for the page "load" event.
    # Expiry is tolerated; geometry is read after the settle delay anyway.
    LOAD_TIMEOUT_MS: int = 5000

    # SETTLE_DELAY_MS: Wait after load so the styling runtime can apply classes
    SETTLE_DELAY_MS: int = 300

    # BROWSER_LAUNCH_TIMEOUT_MS: Upper bound on starting Chromium
    BROWSER_LAUNCH_TIMEOUT_MS: int = 30000

    # ---------------------------------------------------------------------------
    # ROW RECONSTRUCTION
    # ---------------------------------------------------------------------------
    # Elements whose top edges differ by less than this join the same row
    ROW_TOLERANCE_PX: float = 10.0

    # ---------------------------------------------------------------------------
    # API LIMITS
    # ---------------------------------------------------------------------------
    MAX_HTML_LENGTH: int = 500_000


# ---------------------------------------------------------------------------
# GLOBAL SETTINGS INSTANCE
# ---------------------------------------------------------------------------
# Usage: from skeletonizer.core.config import settings
settings = Settings()
