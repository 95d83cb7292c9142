"""Pod and container descriptor models."""

from pydantic import BaseModel, ConfigDict, Field


class ContainerInfo(BaseModel):
    """A container and its requested resources, if any were declared."""

    model_config = ConfigDict(frozen=True)

    name: str
    cpu_request: str | None = None
    memory_request: str | None = None


class PodInfo(BaseModel):
    """A scheduled workload with the node it is bound to."""

    model_config = ConfigDict(frozen=True)

    namespace: str
    name: str
    node_name: str | None = None
    containers: tuple[ContainerInfo, ...] = Field(default_factory=tuple)

    @property
    def key(self) -> str:
        """Return the ``namespace/name`` display key."""
        return f"{self.namespace}/{self.name}"
