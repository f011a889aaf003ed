import os
import logging
from pathlib import Path
from typing import Any, Dict, Optional
import yaml
from blinker import Signal
from platformdirs import user_config_dir
from .core.geo.sectionalize import MAX_SEGMENTS_PER_SECTION


logger = logging.getLogger(__name__)


CONFIG_DIR = Path(user_config_dir("mapforge"))
CONFIG_FILE = CONFIG_DIR / "config.yaml"


def getflag(name, default=False):
    default = "true" if default else "false"
    return os.environ.get(name, default).lower() in ("true", "1")


class Config:
    def __init__(self):
        self.max_segments_per_section: int = MAX_SEGMENTS_PER_SECTION
        self.changed = Signal()

    def set_max_segments_per_section(self, value: int):
        value = int(value)
        if value < 1:
            raise ValueError(
                f"max_segments_per_section must be at least 1, got {value}"
            )
        if value == self.max_segments_per_section:
            return
        self.max_segments_per_section = value
        self.changed.send(self)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "max_segments_per_section": self.max_segments_per_section,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        config = cls()
        for key in data:
            if key not in ("max_segments_per_section",):
                logger.warning(f"Ignoring unknown config key '{key}'")
        config.set_max_segments_per_section(
            data.get(
                "max_segments_per_section", config.max_segments_per_section
            )
        )
        return config


class ConfigManager:
    def __init__(self, filepath: Path):
        self.filepath = Path(filepath)
        self.config: Config = Config()

        self.load_config()

    def save(self):
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(self.filepath, "w") as f:
            yaml.safe_dump(self.config.to_dict(), f)
        logger.info(f"Config saved to {self.filepath}")

    def load_config(self) -> Config:
        if not self.filepath.exists():
            self.config = Config()  # Return a default config
            return self.config

        with open(self.filepath, "r") as f:
            data = yaml.safe_load(f)
        if not data:
            self.config = Config()
            return self.config
        self.config = Config.from_dict(data)
        logger.info(f"Config loaded from {self.filepath}")
        return self.config


# Initialized to None so importing the library never touches the disk.
# Call initialize_config() to load the config file.
config_mgr: Optional[ConfigManager] = None
config: Optional[Config] = None  # Alias for config_mgr.config after init


def initialize_config(filepath: Optional[Path] = None):
    """
    Loads the config file. It is safe to call multiple times
    (idempotent); only the first call reads the file.

    The file path defaults to the MAPFORGE_CONFIG_FILE environment
    variable, then to CONFIG_FILE.
    Setting MAPFORGE_DEBUG=1 enables debug logging for the library.
    """
    global config_mgr, config

    if config_mgr is not None:
        return

    if filepath is None:
        filepath = Path(os.environ.get("MAPFORGE_CONFIG_FILE", CONFIG_FILE))
    if getflag("MAPFORGE_DEBUG"):
        logging.getLogger("mapforge").setLevel(logging.DEBUG)
    logger.info(f"Initializing configuration from {filepath}")
    config_mgr = ConfigManager(filepath)
    config = config_mgr.config


def get_max_segments_per_section() -> int:
    if config is None:
        return MAX_SEGMENTS_PER_SECTION
    return config.max_segments_per_section
