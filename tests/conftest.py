"""Shared pytest fixtures for objfacade tests."""

from __future__ import annotations

import logging
import sys
import textwrap
from collections.abc import Generator, Iterator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from objfacade.config.logging import PACKAGE_LOGGER
from objfacade.infrastructure.diagnostics import CollectingSink

TARGET_MODULE = "facade_target"

TARGET_SOURCE = textwrap.dedent(
    """\
    from typing import ClassVar


    class Account:
        count: ClassVar[int] = 0

        def __init__(self, id_=None):
            self.name = "Ada"
            self._secret = "hidden"
            self._id = id_

        def getId(self) -> int:
            return self._id

        def setId(self, value: int) -> None:
            self._id = value

        def setTags(self) -> None:
            self.tagged = True


    account = Account(id_=42)
    empty = Account()
    """
)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def sink() -> CollectingSink:
    """In-memory diagnostics sink."""
    return CollectingSink()


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's OBJFACADE_* environment out of the tests."""
    monkeypatch.delenv("OBJFACADE_CONFIG", raising=False)
    monkeypatch.delenv("OBJFACADE_POLICY__PRIVATE_PREFIX", raising=False)


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Temp project with an importable ``facade_target`` module as CWD.

    The module is dropped from ``sys.modules`` before and after each test so
    every test sees fresh instances.
    """
    (tmp_path / f"{TARGET_MODULE}.py").write_text(TARGET_SOURCE, encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    monkeypatch.chdir(tmp_path)
    sys.modules.pop(TARGET_MODULE, None)
    try:
        yield tmp_path
    finally:
        sys.modules.pop(TARGET_MODULE, None)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() calls made by the CLI or by a test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger(PACKAGE_LOGGER)
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)
    structlog.reset_defaults()
