"""List parser - turns ``kubectl get ... -o json|yaml`` documents into descriptors."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

import yaml
from pydantic import ValidationError

from kuberviz.models.core.node_info import NodeInfo
from kuberviz.models.core.pod_info import ContainerInfo, PodInfo
from kuberviz.models.errors import ListFormatError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ListParser:
    """Validates v1 List documents and extracts Node and Pod descriptors."""

    API_VERSION = "v1"
    RUNNING_PHASE = "Running"

    def load_document(self, text: str) -> Any:
        """Decode JSON or YAML text (JSON is a subset of YAML)."""
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ListFormatError(f"failed to parse document: {exc}") from exc

    def object_list(self, document: Any, kind: str) -> list[dict[str, Any]]:
        """Return the items of a List whose entries are all ``v1`` objects of ``kind``.

        Raises:
            ListFormatError: If the document or any item has the wrong shape.
        """
        if not isinstance(document, dict):
            raise ListFormatError("expected an object")
        if document.get("kind") != "List":
            raise ListFormatError("expected kind == 'List'")
        items = document.get("items")
        if not isinstance(items, list):
            raise ListFormatError("expected items to be an array")

        for item_idx, item in enumerate(items):
            if not isinstance(item, dict):
                raise ListFormatError(f"expected items[{item_idx}] to be an object")
            if item.get("apiVersion") != self.API_VERSION:
                raise ListFormatError(
                    f"expected items[{item_idx}]['apiVersion'] == '{self.API_VERSION}'"
                )
            if item.get("kind") != kind:
                raise ListFormatError(f"expected items[{item_idx}]['kind'] == '{kind}'")
        return items

    def parse_node(self, item: dict[str, Any]) -> NodeInfo:
        """Extract a node's name and ``status.capacity``."""
        metadata = item.get("metadata") or {}
        capacity = (item.get("status") or {}).get("capacity") or {}
        return NodeInfo(
            name=str(metadata.get("name", "")),
            cpu_capacity=str(capacity.get("cpu", "")),
            memory_capacity=str(capacity.get("memory", "")),
        )

    def parse_container(self, container: dict[str, Any]) -> ContainerInfo:
        """Keep only a container's name and requests."""
        requests = (container.get("resources") or {}).get("requests") or {}
        cpu = requests.get("cpu")
        memory = requests.get("memory")
        return ContainerInfo(
            name=str(container.get("name", "")),
            cpu_request=None if cpu is None else str(cpu),
            memory_request=None if memory is None else str(memory),
        )

    def parse_pod(self, item: dict[str, Any]) -> PodInfo:
        """Minify a pod to namespace, name, node name and container requests."""
        metadata = item.get("metadata") or {}
        spec = item.get("spec") or {}
        return PodInfo(
            namespace=str(metadata.get("namespace", "")),
            name=str(metadata.get("name", "")),
            node_name=spec.get("nodeName") or None,
            containers=tuple(
                self.parse_container(container)
                for container in spec.get("containers") or []
                if isinstance(container, dict)
            ),
        )

    def is_running(self, item: dict[str, Any]) -> bool:
        status = item.get("status")
        return isinstance(status, dict) and status.get("phase") == self.RUNNING_PHASE

    def _convert(
        self,
        items: list[dict[str, Any]],
        convert: Callable[[dict[str, Any]], T],
        keep: Callable[[dict[str, Any]], bool] | None = None,
    ) -> list[T]:
        """Apply ``convert`` to every kept item, reporting bad fields as ListFormatError."""
        converted: list[T] = []
        for item_idx, item in enumerate(items):
            try:
                if keep is not None and not keep(item):
                    continue
                converted.append(convert(item))
            except (ValidationError, AttributeError, TypeError) as exc:
                logger.error(f"invalid list item {item_idx}: {exc}")
                raise ListFormatError(f"items[{item_idx}] has invalid fields: {exc}") from exc
        return converted

    def parse_nodes(self, text: str) -> list[NodeInfo]:
        """Parse a Node List document."""
        items = self.object_list(self.load_document(text), "Node")
        logger.info(f"nodeCount {len(items)}")
        return self._convert(items, self.parse_node)

    def parse_pods(self, text: str, running_only: bool = True) -> list[PodInfo]:
        """Parse a Pod List document, keeping only running pods by default."""
        items = self.object_list(self.load_document(text), "Pod")
        logger.info(f"podCount {len(items)}")
        pods = self._convert(items, self.parse_pod, self.is_running if running_only else None)
        if running_only:
            logger.info(f"filteredPodCount {len(pods)}")
        return pods
