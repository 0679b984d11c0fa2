from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from riftbuilder.analysis.comparison import DEFAULT_MAX_MISSING


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="RIFTBUILDER_")

    app_name: str = "RiftBuilder"
    debug: bool = False

    # Snapshot written by the deck scraper
    decks_path: Path = Path("data/most-viewed.json")

    # Snapshot written by the inventory scraper (or a hand-written map)
    inventory_path: Path = Path("data/sample-inventory.json")

    # Total missing copies still reported as "close"
    max_missing: int = DEFAULT_MAX_MISSING

    # When set, the compare job also writes its results here
    comparison_output_path: Path | None = None


settings = Settings()
