#!/usr/bin/env python3
"""
Configuration dataclasses for infra-inventory.

Provides typed configuration classes that represent config.yaml structure.
"""

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_LOCATIONS = [
    ("us-east", "US East"),
    ("us-west", "US West"),
    ("eu-west", "EU West"),
    ("asia-pacific", "Asia Pacific"),
]


@dataclass
class LocationConfig:
    """Location choice offered by the dashboard filter."""

    name: str
    label: str

    @classmethod
    def parse(cls, data: dict) -> "LocationConfig":
        """Parse from dictionary."""
        name = data["name"]
        # If label is not specified, use name as display label
        return cls(name=name, label=data.get("label", name))


@dataclass
class WebappConfig:
    """Web application configuration."""

    static_dir_path: str

    @classmethod
    def parse(cls, data: dict) -> "WebappConfig":
        """Parse from dictionary."""
        return cls(static_dir_path=data["static_dir_path"])

    def get_static_dir(self, base_dir: Path) -> Path:
        """Get absolute path to static directory."""
        path = Path(self.static_dir_path)
        if not path.is_absolute():
            path = base_dir / path
        return path


@dataclass
class DataConfig:
    """Data directory configuration."""

    dir: str
    sample: bool = False

    @classmethod
    def parse(cls, data: dict) -> "DataConfig":
        """Parse from dictionary."""
        return cls(dir=data["dir"], sample=data.get("sample", False))

    def get_data_dir(self, base_dir: Path) -> Path:
        """Get absolute path to data directory."""
        path = Path(self.dir)
        if not path.is_absolute():
            path = base_dir / path
        return path


@dataclass
class Config:
    """Main configuration class representing config.yaml."""

    webapp: WebappConfig
    data: DataConfig
    location: list[LocationConfig] = field(default_factory=list)

    @classmethod
    def parse(cls, data: dict) -> "Config":
        """Parse from dictionary (parsed YAML)."""
        webapp = WebappConfig.parse(data["webapp"])
        data_config = DataConfig.parse(data["data"])
        raw_location = data.get("location", [])
        if raw_location:
            location = [LocationConfig.parse(loc) for loc in raw_location]
        else:
            location = [LocationConfig(name=name, label=label) for name, label in DEFAULT_LOCATIONS]
        return cls(
            webapp=webapp,
            data=data_config,
            location=location,
        )

    @classmethod
    def load(cls, config_path: Path, schema_path: Path) -> "Config":
        """Load config from YAML file with schema validation."""
        import my_lib.config

        data = my_lib.config.load(config_path, schema_path)
        return cls.parse(data)

    def get_location_label(self, name: str) -> str:
        """Get display label of a location, falling back to its name."""
        for loc in self.location:
            if loc.name == name:
                return loc.label
        return name

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "webapp": {
                "static_dir_path": self.webapp.static_dir_path,
            },
            "data": {
                "dir": self.data.dir,
                "sample": self.data.sample,
            },
            "location": [{"name": loc.name, "label": loc.label} for loc in self.location],
        }
