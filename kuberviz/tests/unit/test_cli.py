"""Tests for the command line entry point."""

from __future__ import annotations

import json
import logging

import pytest
import yaml
from click.testing import CliRunner

from kuberviz.cli import configure_logging, main


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo the handler swap done by configure_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def base_args(tmp_path) -> list[str]:
    """Keep log records out of the captured output."""
    return ["--no-config", "--log-file", str(tmp_path / "kuberviz.log")]


class TestDump:
    """``--dump`` prints layouts instead of starting the TUI."""

    def test_sample_dump(self, runner, base_args) -> None:
        result = runner.invoke(main, ["--sample", "--dump", *base_args])
        assert result.exit_code == 0, result.output
        data = yaml.safe_load(result.output)
        assert [node["node"] for node in data["nodes"]] == ["node-a", "node-b"]
        assert data["errors"] == []
        first = data["nodes"][0]
        assert (first["width"], first["height"]) == (64, 128)
        assert first["tooltips"][0]["text"] == "kube-system/coredns-00000000, cpu=1, mem=0.50"

    def test_sample_dump_is_reproducible(self, runner, base_args) -> None:
        args = ["--sample", "--dump", *base_args]
        assert runner.invoke(main, args).output == runner.invoke(main, args).output

    def test_memory_x_and_filter(self, runner, base_args) -> None:
        result = runner.invoke(
            main, ["--sample", "--dump", *base_args, "--memory-x", "--node-filter", "b$"]
        )
        data = yaml.safe_load(result.output)
        assert [node["node"] for node in data["nodes"]] == ["node-b"]
        assert data["hidden_nodes"] == ["node-a"]
        assert (data["nodes"][0]["width"], data["nodes"][0]["height"]) == (64, 32)

    def test_dump_from_files(self, runner, base_args, tmp_path) -> None:
        nodes = tmp_path / "nodes.json"
        pods = tmp_path / "pods.json"
        nodes.write_text(
            json.dumps(
                {
                    "kind": "List",
                    "items": [
                        {
                            "apiVersion": "v1",
                            "kind": "Node",
                            "metadata": {"name": "worker"},
                            "status": {"capacity": {"cpu": "2", "memory": "4Gi"}},
                        }
                    ],
                }
            ),
            encoding="utf-8",
        )
        pods.write_text(
            json.dumps(
                {
                    "kind": "List",
                    "items": [
                        {
                            "apiVersion": "v1",
                            "kind": "Pod",
                            "metadata": {"name": "lost", "namespace": "prod"},
                            "spec": {"nodeName": "ghost", "containers": []},
                            "status": {"phase": "Running"},
                        }
                    ],
                }
            ),
            encoding="utf-8",
        )
        result = runner.invoke(
            main, ["--dump", *base_args, "--nodes", str(nodes), "--pods", str(pods)]
        )
        assert result.exit_code == 0, result.output
        data = yaml.safe_load(result.output)
        assert data["nodes"][0]["default_tooltip"] == "cpu=2, mem=4"
        assert data["errors"] == ["prod/lost: unknown node reference 'ghost'"]

    def test_malformed_file_is_reported(self, runner, base_args, tmp_path) -> None:
        nodes = tmp_path / "nodes.json"
        nodes.write_text("{}", encoding="utf-8")
        result = runner.invoke(main, ["--dump", *base_args, "--nodes", str(nodes)])
        assert result.exit_code == 1
        assert "expected kind == 'List'" in result.output


class TestOptions:
    """Option validation."""

    def test_invalid_pattern(self, runner, base_args) -> None:
        result = runner.invoke(main, ["--sample", "--dump", *base_args, "--prod", "(("])
        assert result.exit_code == 2
        assert "--prod" in result.output

    def test_invalid_node_filter(self, runner, base_args) -> None:
        result = runner.invoke(main, ["--sample", "--dump", *base_args, "--node-filter", "["])
        assert result.exit_code == 2
        assert "--node-filter" in result.output

    def test_missing_file(self, runner, base_args, tmp_path) -> None:
        result = runner.invoke(main, ["--dump", *base_args, "--nodes", str(tmp_path / "absent.json")])
        assert result.exit_code == 2


class TestConfigureLogging:
    """Verbosity maps to root logger levels."""

    @pytest.mark.parametrize(
        ("verbose", "level"),
        [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)],
    )
    def test_stderr_levels(self, verbose, level) -> None:
        configure_logging(verbose, None)
        assert logging.getLogger().level == level

    @pytest.mark.parametrize(("verbose", "level"), [(0, logging.INFO), (1, logging.DEBUG)])
    def test_log_file_levels(self, tmp_path, verbose, level) -> None:
        configure_logging(verbose, tmp_path / "kuberviz.log")
        root = logging.getLogger()
        assert root.level == level
        assert isinstance(root.handlers[0], logging.FileHandler)
