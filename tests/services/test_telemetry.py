"""Per-call timing added by @traced when timing is switched on."""

from __future__ import annotations

import pytest

from socialgraph.infrastructure.graph.engine import SocialNetwork
from socialgraph.services.network import NetworkService
from socialgraph.services.result import ServiceResult
from socialgraph.services.telemetry import set_timing, traced


class _Echo:
    @traced
    def run(self, value: int) -> ServiceResult:
        return ServiceResult(ok=True, op="echo", data={"value": value}, meta={"kept": True})

    @traced
    def explode(self) -> ServiceResult:
        raise RuntimeError("nope")


class TestTraced:
    def test_off_by_default(self, sample_network: SocialNetwork[int]) -> None:
        assert NetworkService(sample_network).distance(1, 6).meta is None

    def test_on_adds_elapsed_ms(self, sample_network: SocialNetwork[int]) -> None:
        set_timing(True)
        result = NetworkService(sample_network).distance(1, 6)
        assert result.data["length"] == 3
        assert result.meta is not None
        assert result.meta["elapsed_ms"] >= 0

    def test_existing_meta_kept(self) -> None:
        set_timing(True)
        result = _Echo().run(5)
        assert result.data == {"value": 5}
        assert result.meta is not None
        assert result.meta["kept"] is True
        assert "elapsed_ms" in result.meta

    def test_failures_are_timed_too(self) -> None:
        set_timing(True)
        result = NetworkService(SocialNetwork()).friends("ghost")
        assert result.ok is False
        assert result.meta is not None
        assert "elapsed_ms" in result.meta

    def test_exception_propagates(self) -> None:
        set_timing(True)
        with pytest.raises(RuntimeError, match="nope"):
            _Echo().explode()

    def test_keeps_method_name(self) -> None:
        assert NetworkService.distance.__name__ == "distance"
