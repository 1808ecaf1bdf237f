from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Flowpad settings, read from FLOWPAD_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="FLOWPAD_", env_file=".env", extra="ignore")

    # Slot storage
    store_dir: Path = Path.home() / ".flowpad" / "slots"

    # Exports
    export_dir: Path = Path(".")
    json_filename: str = "flowchart.json"
    image_format: str = "png"

    log_level: str = "WARNING"


def get_settings() -> Settings:
    return Settings()
