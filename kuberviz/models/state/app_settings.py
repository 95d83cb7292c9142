"""Application settings models."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ValidationInfo, field_validator

from kuberviz.constants.defaults import (
    CPU_X_DEFAULT,
    NODE_FILTER_DEFAULT,
    NS_GROUP_INFRA_DEFAULT,
    NS_GROUP_PROD_DEFAULT,
    NS_GROUP_SYSTEM_DEFAULT,
    SCALE_UNIT_DEFAULT,
)
from kuberviz.constants.limits import SCALE_UNIT_MAX, SCALE_UNIT_MIN
from kuberviz.utils.patterns import compile_optional_pattern, compile_pattern

if TYPE_CHECKING:
    from kuberviz.controllers.layout.params import RenderParams


class AppSettings(BaseModel):
    """Application settings model with validation."""

    # Sources
    nodes_path: str = ""
    pods_path: str = ""

    # Namespace groups, checked in order system, infra, prod
    ns_group_system: str = NS_GROUP_SYSTEM_DEFAULT
    ns_group_infra: str = NS_GROUP_INFRA_DEFAULT
    ns_group_prod: str = NS_GROUP_PROD_DEFAULT
    node_filter: str = NODE_FILTER_DEFAULT

    # Rendering
    cpu_x: bool = CPU_X_DEFAULT
    scale_unit: float = SCALE_UNIT_DEFAULT

    @field_validator("ns_group_system", "ns_group_infra", "ns_group_prod")
    @classmethod
    def _validate_group_pattern(cls, value: str, info: ValidationInfo) -> str:
        compile_pattern(value, info.field_name)
        return value

    @field_validator("node_filter")
    @classmethod
    def _validate_node_filter(cls, value: str) -> str:
        compile_optional_pattern(value, "node_filter")
        return value

    @field_validator("scale_unit")
    @classmethod
    def _clamp_scale_unit(cls, value: float) -> float:
        return min(max(value, SCALE_UNIT_MIN), SCALE_UNIT_MAX)

    def to_render_params(self) -> RenderParams:
        """Compile the settings into an immutable render snapshot."""
        from kuberviz.controllers.layout.classifier import NamespacePatterns
        from kuberviz.controllers.layout.params import RenderParams

        return RenderParams(
            patterns=NamespacePatterns.from_strings(
                system=self.ns_group_system,
                infra=self.ns_group_infra,
                prod=self.ns_group_prod,
            ),
            cpu_x=self.cpu_x,
            scale_unit=self.scale_unit,
            node_filter=compile_optional_pattern(self.node_filter, "node_filter"),
        )


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""
