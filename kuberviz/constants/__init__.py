"""Constants module for kuberviz.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, colors with Final)
- limits.py: Limit values (max/min)
- defaults.py: Default values for settings
"""

from kuberviz.constants.defaults import (
    CPU_X_DEFAULT,
    NS_GROUP_INFRA_DEFAULT,
    NS_GROUP_PROD_DEFAULT,
    NS_GROUP_SYSTEM_DEFAULT,
    SCALE_UNIT_DEFAULT,
)
from kuberviz.constants.enums import (
    DrawKind,
    IssueKind,
    NamespaceGroup,
    TooltipPriority,
)
from kuberviz.constants.limits import SCALE_UNIT_MAX, SCALE_UNIT_MIN
from kuberviz.constants.values import (
    APP_TITLE,
    BUFFER_NAMESPACE,
    NO_DATA_TEXT,
)

__all__ = [
    # Application
    "APP_TITLE",
    # Layout
    "BUFFER_NAMESPACE",
    # Defaults
    "CPU_X_DEFAULT",
    "NO_DATA_TEXT",
    "NS_GROUP_INFRA_DEFAULT",
    "NS_GROUP_PROD_DEFAULT",
    "NS_GROUP_SYSTEM_DEFAULT",
    "SCALE_UNIT_DEFAULT",
    # Limits
    "SCALE_UNIT_MAX",
    "SCALE_UNIT_MIN",
    # Enums
    "DrawKind",
    "IssueKind",
    "NamespaceGroup",
    "TooltipPriority",
]
