from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from pedigree_builder.cancers import CANCER_TYPES, is_affirmative
from pedigree_builder.family.roles import Role


# -----------------------------
# Sex / vital status codes
# -----------------------------

SEX_MALE = 1
SEX_FEMALE = 2
SEX_UNKNOWN = 3

STATUS_ALIVE = 0
STATUS_DECEASED = 1

NO_PARENT = 0


# -----------------------------
# Small atoms
# -----------------------------

@dataclass(frozen=True, slots=True)
class CancerHistory:
    """
    Resolved history for one cancer type.

    value:
        Age at diagnosis as text, "unk. age" when the age was not given,
        or None when the type was never reported.
    multiple:
        The raw "more than one" answer. Presence alone is meaningful: a
        "false" answer was asked and recorded, None was never asked.
    """
    value: Optional[str] = None
    multiple: Optional[str] = None

    @property
    def recorded(self) -> bool:
        return self.value is not None

    @property
    def is_multiple(self) -> bool:
        return is_affirmative(self.multiple)


# -----------------------------
# Members
# -----------------------------

@dataclass(frozen=True, slots=True)
class FamilyMember:
    """
    One row of the pedigree.

    id:
        Unique within a Family. Positive IDs are drawn with disease
        quadrants; negative IDs are invisible connector placeholders.
    dad_id / mom_id:
        IDs of other members of the same Family, 0 when absent.
    """
    id: int = 0
    name: str = ""
    role: Optional[Role] = None

    gender: Optional[str] = None
    sex: int = SEX_UNKNOWN
    dad_id: int = NO_PARENT
    mom_id: int = NO_PARENT
    status: int = STATUS_ALIVE
    age: str = ""
    ashkenazi: Optional[str] = None
    shared_parent: Optional[str] = None

    cancers: Dict[str, CancerHistory] = field(default_factory=dict)
    other_cancer_type: str = ""

    unknown: bool = False

    def cancer(self, key: str) -> CancerHistory:
        return self.cancers.get(key) or CancerHistory()

    @property
    def is_drawn_with_quadrants(self) -> bool:
        return self.id > 0 and not self.unknown

    def has_multiple_cancers(self) -> bool:
        return any(
            self.cancer(ctype.key).is_multiple
            for ctype in CANCER_TYPES
            if ctype.tracks_multiple
        )


# -----------------------------
# Containers
# -----------------------------

@dataclass(slots=True)
class Household:
    """
    Finalized members grouped by role, before IDs and links are assigned.

    Multi-occupancy groups keep first-seen order.
    """
    singles: Dict[Role, FamilyMember] = field(default_factory=dict)
    groups: Dict[Role, List[FamilyMember]] = field(default_factory=dict)

    def get(self, role: Role) -> Optional[FamilyMember]:
        return self.singles.get(role)

    def group(self, role: Role) -> List[FamilyMember]:
        return self.groups.get(role, [])


@dataclass(slots=True)
class Family:
    """
    Final pedigree: members in emission order.

    Holds no reference back to the accumulators it was built from.
    """
    members: List[FamilyMember] = field(default_factory=list)

    def __iter__(self):
        return iter(self.members)

    def __len__(self) -> int:
        return len(self.members)

    def by_id(self, member_id: int) -> Optional[FamilyMember]:
        for member in self.members:
            if member.id == member_id:
                return member
        return None

    def by_name(self, name: str) -> Optional[FamilyMember]:
        for member in self.members:
            if member.name == name:
                return member
        return None

    @property
    def proband(self) -> Optional[FamilyMember]:
        for member in self.members:
            if member.role is Role.PROBAND:
                return member
        return None

    def has_multiple_cancers(self) -> bool:
        """True if any member reported more than one cancer of the same type."""
        return any(m.has_multiple_cancers() for m in self.members)
