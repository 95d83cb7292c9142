"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from typing import Final

# ============================================================================
# Namespace group defaults
# ============================================================================

NS_GROUP_SYSTEM_DEFAULT: Final = r"(default|kube-(.*)|istio-(.*)|ingress-nginx)"
NS_GROUP_INFRA_DEFAULT: Final = r"(infra|monitoring)"
NS_GROUP_PROD_DEFAULT: Final = r"(.*-)?prod"
NODE_FILTER_DEFAULT: Final = ""

# ============================================================================
# Render defaults
# ============================================================================

CPU_X_DEFAULT: Final = True
SCALE_UNIT_DEFAULT: Final = 1.0
SCALE_UNIT_STEP: Final = 0.5

__all__ = [
    "CPU_X_DEFAULT",
    "NODE_FILTER_DEFAULT",
    "NS_GROUP_INFRA_DEFAULT",
    "NS_GROUP_PROD_DEFAULT",
    "NS_GROUP_SYSTEM_DEFAULT",
    "SCALE_UNIT_DEFAULT",
    "SCALE_UNIT_STEP",
]
