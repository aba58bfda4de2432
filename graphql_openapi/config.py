"""Configuration management for graphql-openapi."""

from dataclasses import dataclass, field
from typing import Optional

import yaml

from . import utils

DEFAULT_CONFIG_PATH = "~/.graphql-openapi/config.yaml"


@dataclass
class Config:
    """Configuration for graphql-openapi."""

    title: str = "Not specified"
    version: str = "Not specified"
    license_name: str = "Not specified"
    servers: list[str] = field(default_factory=lambda: ["/"])
    scalars: dict[str, dict] = field(default_factory=dict)
    unknown_scalar_type: Optional[str] = None

    def info(self) -> dict:
        """The document ``info`` block."""
        return {
            "title": self.title,
            "license": {"name": self.license_name},
            "version": self.version,
        }


def get_default_config_path() -> str:
    """Get default config file path."""
    return utils.expand_path(DEFAULT_CONFIG_PATH)


def load(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Config object with defaults for missing values.
    """
    if config_path is None:
        config_path = get_default_config_path()

    # Return defaults if config doesn't exist
    if not utils.exists(config_path):
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    defaults = Config()
    return Config(
        title=data.get("title", defaults.title),
        version=str(data.get("version", defaults.version)),
        license_name=data.get("license_name", defaults.license_name),
        servers=data.get("servers") or defaults.servers,
        scalars=data.get("scalars") or {},
        unknown_scalar_type=data.get("unknown_scalar_type"),
    )


def create_example_config(path: Optional[str] = None) -> str:
    """Create an example config file and return its path."""
    if path is None:
        path = get_default_config_path()

    utils.ensure_dir(utils.dirname(path))

    example = {
        "title": "My GraphQL API",
        "version": "1.0.0",
        "license_name": "MIT",
        "servers": ["https://api.example.com/rest"],
        "scalars": {
            "DateTime": {"type": "string", "format": "date-time"},
            "JSON": {"type": "object"},
        },
        "unknown_scalar_type": "string",
    }

    with open(path, "w") as f:
        yaml.dump(example, f, default_flow_style=False, sort_keys=False)
    return path
