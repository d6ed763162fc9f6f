"""Layout module — tab registry and the tab-customization engine."""

from peoplehub.layout.customization import (
    MIN_ENABLED_MESSAGE,
    EditSession,
    SessionClosedError,
    TabCustomizer,
)
from peoplehub.layout.tabs import (
    TAB_REGISTRY,
    EnabledTabSet,
    TabDescriptor,
    TabPartition,
    TabRegistry,
    UnknownTabError,
    partition,
)

__all__ = [
    "MIN_ENABLED_MESSAGE",
    "EditSession",
    "SessionClosedError",
    "TabCustomizer",
    "TAB_REGISTRY",
    "EnabledTabSet",
    "TabDescriptor",
    "TabPartition",
    "TabRegistry",
    "UnknownTabError",
    "partition",
]
