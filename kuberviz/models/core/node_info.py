"""Node descriptor models."""

from pydantic import BaseModel, ConfigDict


class NodeInfo(BaseModel):
    """A compute node and its declared capacity as raw quantity strings."""

    model_config = ConfigDict(frozen=True)

    name: str
    cpu_capacity: str
    memory_capacity: str
