"""Shared pytest fixtures and test helpers for socialgraph tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from socialgraph.infrastructure.graph.engine import SocialNetwork
from socialgraph.services.telemetry import set_timing


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's SOCIALGRAPH_* environment out of the tests."""
    monkeypatch.delenv("SOCIALGRAPH_CONFIG", raising=False)
    monkeypatch.delenv("SOCIALGRAPH_NETWORK__MEMBER_TYPE", raising=False)
    monkeypatch.delenv("SOCIALGRAPH_NETWORK__DELIMITER", raising=False)


@pytest.fixture(autouse=True)
def _timing_off() -> Iterator[None]:
    """A --verbose CLI run leaves timing on for the thread; switch it back off."""
    yield
    set_timing(False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in a temp directory so no stray socialgraph.toml is discovered."""
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def sample_network() -> SocialNetwork[int]:
    """Edges (1,2),(1,3),(2,4),(2,5),(4,6),(5,6) plus isolated member 7."""
    network: SocialNetwork[int] = SocialNetwork()
    for first, second in ((1, 2), (1, 3), (2, 4), (2, 5), (4, 6), (5, 6)):
        network.add_friendship(first, second)
    network.add_member(7)
    return network


@pytest.fixture
def write_edges(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing an edge-list file under tmp_path and returning its path."""

    def _write(text: str, name: str = "edges.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
