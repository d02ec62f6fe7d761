# src/flyer_extraction/configs/config.py
import yaml
from pathlib import Path
from functools import lru_cache
from typing import Optional


class Config:
    """
    Configuration for the flyer extraction engine.
    """

    # 1. Setup Base Paths
    # This points to src/flyer_extraction/configs/
    CONFIG_DIR = Path(__file__).parent.resolve()
    # This points to the project root
    PROJECT_ROOT = CONFIG_DIR.parent.parent.parent

    # 2. Define File Paths
    EXTRACTION_CONFIG_PATH = CONFIG_DIR / "extraction.yaml"

    @classmethod
    @lru_cache
    def load_extraction_config(cls, path: Optional[Path] = None) -> dict:
        """Loads the YAML keyword tables used by the field extractors."""
        config_path = Path(path) if path else cls.EXTRACTION_CONFIG_PATH
        if not config_path.exists():
            raise FileNotFoundError(f"Missing config at {config_path}")

        with open(config_path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    @classmethod
    def get_extraction_config_path(cls) -> Path:
        """Returns the absolute path to the extraction tables YAML."""
        return cls.EXTRACTION_CONFIG_PATH
