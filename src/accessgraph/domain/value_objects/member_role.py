"""Role of a person inside a team membership."""

from enum import StrEnum


class MemberRole(StrEnum):
    """Member role within a team."""

    OWNER = "owner"
    LEAD = "lead"
    MEMBER = "member"
    GUEST = "guest"
    OBSERVER = "observer"

    @property
    def is_leadership(self) -> bool:
        return self in (MemberRole.OWNER, MemberRole.LEAD)
