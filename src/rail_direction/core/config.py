"""Configuration loader and dataclasses for line direction settings."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import yaml


_SERVICE_ROOT = (
    "https://services5.arcgis.com/XDMGTTbkgKWI2WMY/arcgis/rest/services/"
    "สถานีและเส้นทางเดินรถ_รฟท/FeatureServer"
)


@dataclass
class ServiceConfig:
    """Feature layers queried and updated by a run."""
    stations_url: str = f"{_SERVICE_ROOT}/6"
    lines_url: str = f"{_SERVICE_ROOT}/20"
    where: str = "1=1"
    out_fields: str = "*"


@dataclass
class CorrectionConfig:
    """Complete correction configuration."""
    service: ServiceConfig = field(default_factory=ServiceConfig)

    @classmethod
    def from_yaml(cls, path: Path) -> "CorrectionConfig":
        """Load configuration from a YAML file."""
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        return cls(
            service=ServiceConfig(**data.get("service", {})),
        )


# Global config instance - lazily loaded
_config: Optional[CorrectionConfig] = None


def get_config(config_path: Optional[Path] = None) -> CorrectionConfig:
    """Get the global configuration, loading from file if not already loaded.

    Args:
        config_path: Path to the config file. If None, uses configs/line_direction.yaml
            at the project root.

    Returns:
        The CorrectionConfig instance.
    """
    global _config

    if _config is None or config_path is not None:
        if config_path is None:
            project_root = Path(__file__).resolve().parents[3]
            config_path = project_root / "configs" / "line_direction.yaml"

        if config_path.exists():
            _config = CorrectionConfig.from_yaml(config_path)
        else:
            _config = CorrectionConfig()

    return _config


def reload_config(config_path: Optional[Path] = None) -> CorrectionConfig:
    """Force reload of configuration from file."""
    global _config
    _config = None
    return get_config(config_path)
