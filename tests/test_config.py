"""Tests for xmlclasscheck.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from xmlclasscheck.config import ConfigError, PluginConfig, load_config, require_xml_dir


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, PluginConfig)
    assert config.root == tmp_path.resolve()
    assert config.xml_dir is None
    assert config.project_root is None
    assert config.symbols is None
    assert config.report_parse_errors is False


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".xmlclasscheck.yml"
    config_file.write_text(
        """
xml_dir: "config/xml"
project_root: .
symbols: build/classes.txt
report_parse_errors: yes
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    root = tmp_path.resolve()
    assert config.xml_dir == root / "config" / "xml"
    assert config.project_root == root / "."
    assert config.symbols == root / "build" / "classes.txt"
    assert config.report_parse_errors is True


def test_load_config_keeps_absolute_paths(tmp_path: Path) -> None:
    xml_dir = tmp_path / "elsewhere"
    (tmp_path / ".xmlclasscheck.yml").write_text(f"xml_dir: '{xml_dir}'\n", encoding="utf-8")

    assert load_config(tmp_path).xml_dir == xml_dir


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    (tmp_path / ".xmlclasscheck.yml").write_text("- xml_dir\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_invalid_yaml(tmp_path: Path) -> None:
    (tmp_path / ".xmlclasscheck.yml").write_text("xml_dir: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError) as excinfo:
        load_config(tmp_path)

    assert ".xmlclasscheck.yml" in str(excinfo.value)


def test_require_xml_dir_missing_value(tmp_path: Path) -> None:
    with pytest.raises(ConfigError) as excinfo:
        require_xml_dir(PluginConfig(root=tmp_path))

    assert "missing config 'xml_dir'" in str(excinfo.value)


def test_require_xml_dir_rejects_files(tmp_path: Path) -> None:
    not_a_dir = tmp_path / "file.xml"
    not_a_dir.write_text("<root/>", encoding="utf-8")

    with pytest.raises(ConfigError) as excinfo:
        require_xml_dir(PluginConfig(root=tmp_path, xml_dir=not_a_dir))

    assert f"got '{not_a_dir}'" in str(excinfo.value)


def test_require_xml_dir_returns_directory(tmp_path: Path) -> None:
    assert require_xml_dir(PluginConfig(root=tmp_path, xml_dir=tmp_path)) == tmp_path


@pytest.mark.parametrize("value", ["", "   "])
def test_require_xml_dir_treats_blank_value_as_missing(tmp_path: Path, value: str) -> None:
    with pytest.raises(ConfigError) as excinfo:
        require_xml_dir(PluginConfig(root=tmp_path, xml_dir=value))

    assert "missing config 'xml_dir'" in str(excinfo.value)


def test_load_config_ignores_empty_xml_dir(tmp_path: Path) -> None:
    (tmp_path / ".xmlclasscheck.yml").write_text("xml_dir: ''\n", encoding="utf-8")

    config = load_config(tmp_path)

    assert config.xml_dir is None
    with pytest.raises(ConfigError):
        require_xml_dir(config)
