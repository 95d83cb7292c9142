"""Cluster controller - loads Node and Pod list files into descriptors."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

from kuberviz.controllers.base import BaseController, WorkerResult
from kuberviz.controllers.cluster.parsers import ListParser
from kuberviz.models.core.node_info import NodeInfo
from kuberviz.models.core.pod_info import PodInfo
from kuberviz.models.errors import ListFormatError

logger = logging.getLogger(__name__)


@dataclass
class ClusterData:
    """Descriptors loaded from the configured sources."""

    nodes: list[NodeInfo] = field(default_factory=list)
    pods: list[PodInfo] = field(default_factory=list)


class ClusterController(BaseController):
    """Reads ``kubectl get nodes|pods -o json`` exports from disk.

    Either path may be unset, in which case that list is empty.
    """

    def __init__(self, nodes_path: Path | str | None = None, pods_path: Path | str | None = None) -> None:
        self.nodes_path = Path(nodes_path).expanduser() if nodes_path else None
        self.pods_path = Path(pods_path).expanduser() if pods_path else None
        self._parser = ListParser()

    def _read(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ListFormatError(f"failed to read {path}: {exc}") from exc

    def load_nodes(self) -> list[NodeInfo]:
        """Load and parse the node list file.

        Raises:
            ListFormatError: If the file cannot be read or has the wrong shape.
        """
        if self.nodes_path is None:
            return []
        nodes = self._parser.parse_nodes(self._read(self.nodes_path))
        logger.info(f"{len(nodes)} nodes loaded from {self.nodes_path}")
        return nodes

    def load_pods(self) -> list[PodInfo]:
        """Load and parse the pod list file, keeping running pods only.

        Raises:
            ListFormatError: If the file cannot be read or has the wrong shape.
        """
        if self.pods_path is None:
            return []
        pods = self._parser.parse_pods(self._read(self.pods_path))
        logger.info(f"{len(pods)} pods loaded from {self.pods_path}")
        return pods

    def load_all(self) -> ClusterData:
        """Load both lists synchronously."""
        return ClusterData(nodes=self.load_nodes(), pods=self.load_pods())

    async def check_sources(self) -> bool:
        """Return True when every configured path points to a readable file."""
        paths = [path for path in (self.nodes_path, self.pods_path) if path is not None]
        results = await asyncio.gather(*(asyncio.to_thread(path.is_file) for path in paths))
        return all(results)

    async def fetch_all(self) -> WorkerResult:
        """Load both lists off the event loop.

        Returns:
            WorkerResult with ClusterData on success or the error message.
        """
        start = time.monotonic()
        try:
            data = await asyncio.to_thread(self.load_all)
        except ListFormatError as exc:
            logger.error(f"loading cluster lists failed: {exc}")
            return WorkerResult(
                success=False,
                error=str(exc),
                duration_ms=(time.monotonic() - start) * 1000,
            )
        return WorkerResult(
            success=True,
            data=data,
            duration_ms=(time.monotonic() - start) * 1000,
        )
