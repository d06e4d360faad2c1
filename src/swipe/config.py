"""
Config loader for SwipeType.
Loads YAML configuration with dataclass validation.
"""
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional
import yaml

logger = logging.getLogger(__name__)


@dataclass
class SwipeConfig:
    min_swipe_distance: float = 50.0   # Path length needed for a valid swipe
    hit_radius: float = 60.0           # Max distance from key center to register a hit
    min_key_interval_ms: int = 30      # Debounce between distinct key visits
    confidence_threshold: float = 0.3  # Visits at or below this are left out of the word
    suggestion_limit: int = 5
    prefix_length: int = 2             # Dictionary prefilter on the candidate's first chars

    def __post_init__(self):
        if self.hit_radius <= 0:
            raise ValueError(f"hit_radius must be positive, got {self.hit_radius}")
        if self.min_swipe_distance < 0:
            raise ValueError(f"min_swipe_distance must be >= 0, got {self.min_swipe_distance}")
        if self.min_key_interval_ms < 0:
            raise ValueError(f"min_key_interval_ms must be >= 0, got {self.min_key_interval_ms}")
        if not 0.0 <= self.confidence_threshold <= 1.0:
            raise ValueError(
                f"confidence_threshold must be within [0, 1], got {self.confidence_threshold}"
            )
        if self.suggestion_limit <= 0:
            raise ValueError(f"suggestion_limit must be positive, got {self.suggestion_limit}")
        if self.prefix_length < 0:
            raise ValueError(f"prefix_length must be >= 0, got {self.prefix_length}")


@dataclass
class KeyboardConfig:
    layout: str = "qwerty"
    width: float = 500.0
    height: float = 250.0


@dataclass
class DictionaryConfig:
    path: Optional[str] = None


@dataclass
class Config:
    swipe: SwipeConfig = field(default_factory=SwipeConfig)
    keyboard: KeyboardConfig = field(default_factory=KeyboardConfig)
    dictionary: DictionaryConfig = field(default_factory=DictionaryConfig)


DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config.yaml"


def _build_section(cls, name: str, data):
    """Build one config section, dropping keys the section does not define."""
    if data is None:
        return cls()
    if not isinstance(data, dict):
        raise ValueError(f"Config section '{name}' must be a mapping, got {data!r}")
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(data) - known)
    if unknown:
        logger.warning("Ignoring unknown '%s' settings: %s", name, ", ".join(unknown))
    return cls(**{k: v for k, v in data.items() if k in known})


def load_config(config_path: Optional[Path] = None) -> Config:
    """
    Load SwipeType settings from YAML.

    Each top-level Config field is a section of the same name in the file.
    Missing file or missing sections fall back to defaults.

    Raises:
        ValueError: If a section is not a mapping or a value fails validation.
        yaml.YAMLError: If the file is not valid YAML.
    """
    config_path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
    if not config_path.exists():
        return Config()

    with open(config_path, 'r') as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")

    sections = {
        section.name: _build_section(section.default_factory, section.name, data.get(section.name))
        for section in fields(Config)
    }
    return Config(**sections)
