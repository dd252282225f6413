"""
Runtime settings

Loads settings from environment variables (and a .env file in the working
directory, via python-dotenv) and provides defaults.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .models.config import EngineConfig, load_config


@dataclass
class EngineSettings:
    """Settings for running the engine outside a host application."""

    # JSON file with EngineConfig overrides; None uses the defaults.
    config_path: Optional[Path] = None
    # Directory holding positions.json, candidates.json, applications.json.
    data_dir: Path = Path("data")
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "EngineSettings":
        """Load settings from environment variables."""
        load_dotenv()
        config_path = os.getenv("MATCH_ENGINE_CONFIG")
        return cls(
            config_path=Path(config_path) if config_path else None,
            data_dir=Path(os.getenv("MATCH_ENGINE_DATA_DIR", "data")),
            log_level=os.getenv("MATCH_ENGINE_LOG_LEVEL", "INFO").upper(),
        )

    def load_engine_config(self) -> EngineConfig:
        return load_config(self.config_path)
