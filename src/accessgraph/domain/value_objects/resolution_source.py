"""Which resolver produced a permission decision."""

from enum import StrEnum


class ResolutionSource(StrEnum):
    """Source of a permission decision."""

    OVERRIDE = "override"
    POSITION = "position"
    GROUP = "group"
    NONE = "none"
