from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from tests._fixtures.xml_tree import XMLTreeBuilder


@pytest.fixture
def xml_tree(tmp_path: Path) -> XMLTreeBuilder:
    """Provide a reusable XML tree builder rooted at the pytest tmp_path."""
    return XMLTreeBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo `configure_logging` so caplog keeps seeing package records."""
    yield
    logger = logging.getLogger("xmlclasscheck")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
