"""Tests for full render passes."""

from __future__ import annotations

import re

from kuberviz.constants.enums import IssueKind
from kuberviz.controllers.layout.controller import LayoutController
from kuberviz.controllers.layout.params import RenderParams
from kuberviz.models.core.node_info import NodeInfo
from kuberviz.utils.sample_data import sample_nodes, sample_pods


class TestLayoutController:
    """Tests for LayoutController.build_all()."""

    def test_one_layout_per_node_in_order(self) -> None:
        result = LayoutController().build_all(sample_nodes(), sample_pods(deterministic=True))
        assert [layout.node_name for layout in result.layouts] == ["node-a", "node-b"]
        assert result.hidden_nodes == ()

    def test_node_filter_hides_nodes(self) -> None:
        params = RenderParams(node_filter=re.compile("-b$"))
        result = LayoutController(params).build_all(sample_nodes(), sample_pods(deterministic=True))
        assert [layout.node_name for layout in result.layouts] == ["node-b"]
        assert result.hidden_nodes == ("node-a",)
        assert result.layout_for("node-a") is None

    def test_errors_aggregated(self, make_pod) -> None:
        nodes = [NodeInfo(name="node-a", cpu_capacity="4", memory_capacity="8Gi")]
        pods = [
            make_pod("prod", "orphan", node_name="node-z"),
            make_pod("prod", "bad", cpu="lots"),
        ]
        result = LayoutController().build_all(nodes, pods)
        assert [issue.kind for issue in result.errors] == [IssueKind.REFERENCE, IssueKind.PARSE]
        assert result.error_messages == [
            "prod/orphan: unknown node reference 'node-z'",
            "prod/bad/bad: invalid cpu quantity 'lots'",
        ]

    def test_parallel_matches_serial(self) -> None:
        nodes, pods = sample_nodes(), sample_pods(deterministic=True)
        serial = LayoutController().build_all(nodes, pods)
        parallel = LayoutController(parallel=True).build_all(nodes, pods)
        assert serial.to_dict() == parallel.to_dict()

    def test_to_dict_shape(self) -> None:
        data = LayoutController().build_all(sample_nodes(), sample_pods(deterministic=True)).to_dict()
        assert set(data) == {"nodes", "hidden_nodes", "errors"}
        node = data["nodes"][0]
        assert node["node"] == "node-a"
        assert node["default_tooltip"] == "cpu=64, mem=128"
        assert {"kind", "x", "y", "width", "height"} <= set(node["rectangles"][0])
