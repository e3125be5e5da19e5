from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Console log
    LOG_TIME_FORMAT: str = "%H:%M:%S"
    LOG_HISTORY_LIMIT: int = 500  # 0 keeps every entry

    # Tree layout geometry (pixels)
    NODE_RADIUS: float = 22.0
    LEAF_MARGIN: float = 10.0
    SIBLING_GAP: float = 20.0
    SINGLE_CHILD_SHIFT: float = 20.0
    LEVEL_SPACING: float = 70.0
    TOP_MARGIN: float = 40.0

    # Canvas the renderer centers the tree in
    CANVAS_MIN_WIDTH: float = 600.0
    CANVAS_MIN_HEIGHT: float = 500.0
    CANVAS_BOTTOM_PADDING: float = 50.0

    # Loads from a .env file in the root directory
    model_config = SettingsConfigDict(env_file=".env", env_prefix="DSVIS_", extra="ignore")

# Singleton instance
settings = Settings()
