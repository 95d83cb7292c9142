"""Tests for loading list files from disk."""

from __future__ import annotations

import json

import pytest

from kuberviz.controllers.cluster import ClusterController, ClusterData
from kuberviz.models.errors import ListFormatError

NODES = {
    "kind": "List",
    "items": [
        {
            "apiVersion": "v1",
            "kind": "Node",
            "metadata": {"name": "node-a"},
            "status": {"capacity": {"cpu": "4", "memory": "8Gi"}},
        }
    ],
}
PODS = {
    "kind": "List",
    "items": [
        {
            "apiVersion": "v1",
            "kind": "Pod",
            "metadata": {"name": "web", "namespace": "prod"},
            "spec": {
                "nodeName": "node-a",
                "containers": [
                    {"name": "web", "resources": {"requests": {"cpu": "1", "memory": "1Gi"}}}
                ],
            },
            "status": {"phase": "Running"},
        }
    ],
}


@pytest.fixture
def sources(tmp_path):
    nodes_path = tmp_path / "nodes.json"
    pods_path = tmp_path / "pods.json"
    nodes_path.write_text(json.dumps(NODES), encoding="utf-8")
    pods_path.write_text(json.dumps(PODS), encoding="utf-8")
    return nodes_path, pods_path


class TestClusterControllerSync:
    """Synchronous loading."""

    def test_load_all(self, sources) -> None:
        data = ClusterController(*sources).load_all()
        assert [n.name for n in data.nodes] == ["node-a"]
        assert [p.key for p in data.pods] == ["prod/web"]

    def test_unset_paths_give_empty_lists(self) -> None:
        assert ClusterController().load_all() == ClusterData()

    def test_missing_file_raises_list_format_error(self, tmp_path) -> None:
        controller = ClusterController(nodes_path=tmp_path / "absent.json")
        with pytest.raises(ListFormatError, match="failed to read"):
            controller.load_nodes()


class TestClusterControllerAsync:
    """Worker-facing coroutines."""

    @pytest.mark.asyncio
    async def test_check_sources(self, sources, tmp_path) -> None:
        assert await ClusterController(*sources).check_sources() is True
        assert await ClusterController(tmp_path / "nope.json").check_sources() is False

    @pytest.mark.asyncio
    async def test_fetch_all_success(self, sources) -> None:
        result = await ClusterController(*sources).fetch_all()
        assert result.success is True
        assert isinstance(result.data, ClusterData)
        assert len(result.data.pods) == 1
        assert result.duration_ms >= 0

    @pytest.mark.asyncio
    async def test_fetch_all_reports_errors(self, tmp_path) -> None:
        bad = tmp_path / "pods.json"
        bad.write_text(json.dumps({"kind": "Pod"}), encoding="utf-8")
        result = await ClusterController(pods_path=bad).fetch_all()
        assert result.success is False
        assert result.error == "expected kind == 'List'"
        assert result.data is None

    @pytest.mark.asyncio
    async def test_fetch_all_reports_invalid_fields(self, tmp_path) -> None:
        bad = tmp_path / "pods.yaml"
        bad.write_text(
            "kind: List\n"
            "items:\n"
            "  - apiVersion: v1\n"
            "    kind: Pod\n"
            "    metadata: {name: web, namespace: prod}\n"
            "    spec: {nodeName: 123, containers: []}\n"
            "    status: {phase: Running}\n",
            encoding="utf-8",
        )
        result = await ClusterController(pods_path=bad).fetch_all()
        assert result.success is False
        assert result.error.startswith("items[0] has invalid fields")
