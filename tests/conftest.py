"""Shared pytest fixtures and configuration for the expr-tree test suite.

Guidelines
----------
* Render into in-memory buffers; stdout/stderr only in CLI tests.
* Expected diagrams are written out literally, byte for byte.
* Tests must not leak logging configuration into each other.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from expr_tree.core.builders import sample_tree
from expr_tree.core.models import Add


_SAMPLE_DIAGRAM = (
    "add\n"
    "├── add\n"
    "|  ├── add\n"
    "|  |  ├── number(1)\n"
    "|  |  └── number(2)\n"
    "|  └── add\n"
    "|     ├── number(3)\n"
    "|     └── number(4)\n"
    "└── number(5)\n"
)


@pytest.fixture
def sample() -> Add:
    return sample_tree()


@pytest.fixture
def sample_diagram() -> str:
    """Exact rendering of the sample tree."""
    return _SAMPLE_DIAGRAM


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo handlers/levels installed by CLI runs."""
    yield
    package_logger = logging.getLogger("expr_tree")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
