"""Tests for xmlclasscheck.symbols."""

from __future__ import annotations

from pathlib import Path

import pytest

from xmlclasscheck.config import ConfigError
from xmlclasscheck.names import parse_fully_qualified_name
from xmlclasscheck.symbols import InMemorySymbolTable, load_symbol_table


def test_in_memory_table_membership() -> None:
    table = InMemorySymbolTable.from_names(["App\\User", "\\App\\Order"])

    assert len(table) == 2
    assert table.exists(parse_fully_qualified_name("App\\Order"))
    assert table.exists(parse_fully_qualified_name("app\\user"))
    assert not table.exists(parse_fully_qualified_name("App\\Invoice"))


def test_load_text_symbols_skips_comments_and_blanks(tmp_path: Path) -> None:
    path = tmp_path / "classes.txt"
    path.write_text("# declared classes\nApp\\User\n\n\\App\\Order  # trailing comment\n", encoding="utf-8")

    table = load_symbol_table(path)

    assert len(table) == 2
    assert table.exists(parse_fully_qualified_name("App\\Order"))


def test_load_yaml_list(tmp_path: Path) -> None:
    path = tmp_path / "classes.yml"
    path.write_text("- App\\User\n- App\\Order\n", encoding="utf-8")

    table = load_symbol_table(path)

    assert table.exists(parse_fully_qualified_name("App\\User"))


def test_load_yaml_mapping_with_classes_key(tmp_path: Path) -> None:
    path = tmp_path / "classes.yaml"
    path.write_text("classes:\n  - 'App\\Model\\Post'\n", encoding="utf-8")

    table = load_symbol_table(path)

    assert table.exists(parse_fully_qualified_name("App\\Model\\Post"))


def test_load_rejects_invalid_names_with_position(tmp_path: Path) -> None:
    path = tmp_path / "classes.txt"
    path.write_text("App\\User\n9Bad\n", encoding="utf-8")

    with pytest.raises(ConfigError) as excinfo:
        load_symbol_table(path)

    assert "classes.txt:2" in str(excinfo.value)
    assert "9Bad" in str(excinfo.value)


def test_load_missing_file_raises_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_symbol_table(tmp_path / "absent.txt")


def test_load_yaml_rejects_scalar_document(tmp_path: Path) -> None:
    path = tmp_path / "classes.yml"
    path.write_text("just-a-string\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_symbol_table(path)
