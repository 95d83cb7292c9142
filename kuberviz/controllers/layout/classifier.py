"""Namespace priority classifier.

Maps a namespace to one of four ordered groups using three user
configurable regular expressions evaluated in a fixed order. Matching uses
``re.search`` semantics: a pattern matches anywhere in the namespace unless
it anchors itself.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from kuberviz.constants.defaults import (
    NS_GROUP_INFRA_DEFAULT,
    NS_GROUP_PROD_DEFAULT,
    NS_GROUP_SYSTEM_DEFAULT,
)
from kuberviz.constants.enums import NamespaceGroup
from kuberviz.utils.patterns import compile_pattern


@dataclass(frozen=True)
class NamespacePatterns:
    """Compiled system/infra/prod patterns, checked in that order."""

    system: re.Pattern[str]
    infra: re.Pattern[str]
    prod: re.Pattern[str]

    @classmethod
    def from_strings(
        cls,
        system: str = NS_GROUP_SYSTEM_DEFAULT,
        infra: str = NS_GROUP_INFRA_DEFAULT,
        prod: str = NS_GROUP_PROD_DEFAULT,
    ) -> NamespacePatterns:
        """Compile all three patterns.

        Raises:
            PatternError: If any pattern does not compile.
        """
        return cls(
            system=compile_pattern(system, "system"),
            infra=compile_pattern(infra, "infra"),
            prod=compile_pattern(prod, "prod"),
        )

    @classmethod
    def default(cls) -> NamespacePatterns:
        return cls.from_strings()


def classify(namespace: str, patterns: NamespacePatterns) -> NamespaceGroup:
    """Return the group ordinal of ``namespace``."""
    if patterns.system.search(namespace):
        return NamespaceGroup.SYSTEM
    if patterns.infra.search(namespace):
        return NamespaceGroup.INFRA
    if patterns.prod.search(namespace):
        return NamespaceGroup.PROD
    return NamespaceGroup.OTHER
