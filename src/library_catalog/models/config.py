"""Configuration model for the library catalog."""

from pathlib import Path
from typing import Any, Dict, List
import json
import logging
from dataclasses import dataclass, field

from ..exceptions import ConfigurationError


def _default_seed_items() -> List[Dict[str, str]]:
    return [
        {"title": "The Great Gatsby", "author": "F. Scott Fitzgerald", "kind": "Book"},
        {"title": "National Geographic", "author": "Various", "kind": "Magazine"},
        {"title": "Abbey Road", "author": "The Beatles", "kind": "CD"},
    ]


@dataclass
class CatalogConfig:
    """Main configuration model."""
    name: str = "Library Catalog"
    log_level: str = "WARNING"
    seed_items: List[Dict[str, str]] = field(default_factory=_default_seed_items)

    @classmethod
    def default(cls) -> "CatalogConfig":
        """Create a default configuration seeded with the sample items."""
        return cls()


def _dict_to_config(data: Dict[str, Any]) -> CatalogConfig:
    """Build a config from a dict, ignoring unknown keys."""
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration must be a JSON object")

    kwargs = {}
    if "name" in data:
        kwargs["name"] = str(data["name"])

    if "log_level" in data:
        log_level = str(data["log_level"]).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigurationError(f"Unknown log level: {data['log_level']}")
        kwargs["log_level"] = log_level

    if "seed_items" in data:
        seed_items = data["seed_items"]
        if not isinstance(seed_items, list) or not all(isinstance(e, dict) for e in seed_items):
            raise ConfigurationError("'seed_items' must be a list of objects")
        for index, entry in enumerate(seed_items):
            for key in ("title", "author", "kind"):
                if key not in entry:
                    raise ConfigurationError(f"Seed item {index} is missing {key}")
                if not isinstance(entry[key], str):
                    raise ConfigurationError(
                        f"Seed item {index} has a non-string {key}: {entry[key]!r}"
                    )
        kwargs["seed_items"] = seed_items

    return CatalogConfig(**kwargs)


def load_config(config_path: Path) -> CatalogConfig:
    """Load configuration from JSON file."""
    try:
        with open(config_path, 'r', encoding="utf-8") as f:
            config_data = json.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Configuration file not found: {config_path}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration file {config_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigurationError(f"Configuration file {config_path} is not UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {config_path}: {e}") from e

    return _dict_to_config(config_data)


def save_config(config: CatalogConfig, config_path: Path) -> None:
    """Save configuration to JSON file."""
    config_dict = {
        "name": config.name,
        "log_level": config.log_level,
        "seed_items": config.seed_items,
    }

    with open(config_path, 'w', encoding="utf-8") as f:
        json.dump(config_dict, f, indent=2)
