"""Shared fixtures for kuberviz tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from kuberviz.app import KubervizApp
from kuberviz.controllers.layout.params import RenderParams
from kuberviz.models.core.node_info import NodeInfo
from kuberviz.models.core.pod_info import ContainerInfo, PodInfo
from kuberviz.models.state import AppSettings


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path, monkeypatch) -> None:
    """Keep settings files out of the real home directory."""
    monkeypatch.setenv("KUBERVIZ_CONFIG_DIR", str(tmp_path / "config"))


@pytest.fixture
def params() -> RenderParams:
    """Default render parameters (cpu on x, scale 1, default patterns)."""
    return RenderParams()


@pytest.fixture
def make_pod() -> Callable[..., PodInfo]:
    """Factory for single-container pods."""

    def _make_pod(
        namespace: str,
        name: str,
        cpu: str | None = "1",
        memory: str | None = "1Gi",
        node_name: str | None = "node-a",
    ) -> PodInfo:
        return PodInfo(
            namespace=namespace,
            name=name,
            node_name=node_name,
            containers=(ContainerInfo(name=name, cpu_request=cpu, memory_request=memory),),
        )

    return _make_pod


@pytest.fixture
def node() -> NodeInfo:
    """A 4 core / 8Gi node."""
    return NodeInfo(name="node-a", cpu_capacity="4", memory_capacity="8Gi")


@pytest.fixture
def app() -> KubervizApp:
    """App showing the sample cluster without touching the settings file."""
    return KubervizApp(sample=True, settings=AppSettings(), persist_settings=False)
