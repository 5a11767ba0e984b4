from __future__ import annotations

from pathlib import Path

from rail_direction.core.config import CorrectionConfig, ServiceConfig, get_config, reload_config


def test_defaults_point_at_stations_and_lines_layers() -> None:
    cfg = CorrectionConfig()
    assert cfg.service.stations_url.endswith("/FeatureServer/6")
    assert cfg.service.lines_url.endswith("/FeatureServer/20")
    assert cfg.service.where == "1=1"


def test_from_yaml_overrides_fields(tmp_path: Path) -> None:
    path = tmp_path / "line_direction.yaml"
    path.write_text("service:\n  lines_url: https://example.test/FeatureServer/3\n", encoding="utf-8")
    cfg = CorrectionConfig.from_yaml(path)
    assert cfg.service.lines_url == "https://example.test/FeatureServer/3"
    assert cfg.service.stations_url == ServiceConfig().stations_url


def test_missing_file_falls_back_to_defaults(tmp_path: Path) -> None:
    try:
        cfg = reload_config(tmp_path / "absent.yaml")
        assert cfg == CorrectionConfig()
        assert get_config() is cfg
    finally:
        reload_config()


def test_empty_yaml_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert CorrectionConfig.from_yaml(path) == CorrectionConfig()
