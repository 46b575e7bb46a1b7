"""
Identifier & linkage assignment.

Numbering scheme
----------------

    Member                  ID     Dadid  Momid
    Unknown father          -1     0      0
    Unknown mother          -2     0      0
    Unknown husband         -3     0      0
    Unknown wife            -4     0      0
    Paternal grandfather     1     0      0
    Paternal grandmother     2     0      0
    Maternal grandfather     3     0      0
    Maternal grandmother     4     0      0
    Father                   5     1      2
    Mother                   6     3      4
    Proband                  7     5      6
    Child                    8..   7/-3   -4/7
    Sibling                  ..    5/-1   6/-2
    Mother's sibling         ..    3      4
    Father's sibling         ..    1      2

Negative IDs are invisible connectors. Every placeholder the renderer needs
to keep the graph connected is synthesized here, at most once per family,
with ``unknown=True``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Tuple

from pedigree_builder.core.exceptions import MissingProbandError
from pedigree_builder.family.entities import (
    NO_PARENT,
    SEX_FEMALE,
    SEX_MALE,
    SEX_UNKNOWN,
    Family,
    FamilyMember,
    Household,
)
from pedigree_builder.family.roles import MULTI_ROLES, Role
from pedigree_builder.logging import get_logger

log = get_logger(__name__)

PATERNAL_GRANDFATHER_ID = 1
PATERNAL_GRANDMOTHER_ID = 2
MATERNAL_GRANDFATHER_ID = 3
MATERNAL_GRANDMOTHER_ID = 4
FATHER_ID = 5
MOTHER_ID = 6
PROBAND_ID = 7
FIRST_GENERATED_ID = 8

FIXED_IDS: Dict[Role, int] = {
    Role.PATERNAL_GRANDFATHER: PATERNAL_GRANDFATHER_ID,
    Role.PATERNAL_GRANDMOTHER: PATERNAL_GRANDMOTHER_ID,
    Role.MATERNAL_GRANDFATHER: MATERNAL_GRANDFATHER_ID,
    Role.MATERNAL_GRANDMOTHER: MATERNAL_GRANDMOTHER_ID,
    Role.FATHER: FATHER_ID,
    Role.MOTHER: MOTHER_ID,
    Role.PROBAND: PROBAND_ID,
}

DISPLAY_NAMES: Dict[Role, str] = {
    Role.PATERNAL_GRANDFATHER: "Grandfather",
    Role.PATERNAL_GRANDMOTHER: "Grandmother",
    Role.MATERNAL_GRANDFATHER: "Grandfather",
    Role.MATERNAL_GRANDMOTHER: "Grandmother",
    Role.FATHER: "Father",
    Role.MOTHER: "Mother",
    Role.PROBAND: "Respondent",
}

# Fixed-ID roles in emission order
LINEAGE_ORDER: Tuple[Role, ...] = (
    Role.PATERNAL_GRANDFATHER,
    Role.PATERNAL_GRANDMOTHER,
    Role.MATERNAL_GRANDFATHER,
    Role.MATERNAL_GRANDMOTHER,
    Role.FATHER,
    Role.MOTHER,
    Role.PROBAND,
)

MALE = "male"
FEMALE = "female"
OTHER = "other"


@dataclass(frozen=True, slots=True)
class Placeholder:
    """A connector parent that is never reported by the respondent."""
    id: int
    gender: str
    name: str


# Half-sibling parents and the proband's partner
UNKNOWN_FATHER = Placeholder(-1, MALE, "Unknown_Father")
UNKNOWN_MOTHER = Placeholder(-2, FEMALE, "Unknown_Mother")
UNKNOWN_HUSBAND = Placeholder(-3, MALE, "Unknown")
UNKNOWN_WIFE = Placeholder(-4, FEMALE, "Unknown")

_SEX_FOR_GENDER = {MALE: SEX_MALE, FEMALE: SEX_FEMALE}

# Which reported relatives pull in each side of the lineage
_SIDES = (
    (
        Role.FATHER,
        (Role.PATERNAL_GRANDFATHER, Role.PATERNAL_GRANDMOTHER),
        Role.FATHERS_SIBLING,
    ),
    (
        Role.MOTHER,
        (Role.MATERNAL_GRANDFATHER, Role.MATERNAL_GRANDMOTHER),
        Role.MOTHERS_SIBLING,
    ),
)

_GENDER_FOR_ROLE = {
    Role.PATERNAL_GRANDFATHER: MALE,
    Role.PATERNAL_GRANDMOTHER: FEMALE,
    Role.MATERNAL_GRANDFATHER: MALE,
    Role.MATERNAL_GRANDMOTHER: FEMALE,
    Role.FATHER: MALE,
    Role.MOTHER: FEMALE,
}


def _unknown_member(member_id: int, gender: str, name: str, role: Optional[Role] = None) -> FamilyMember:
    return FamilyMember(
        id=member_id,
        name=name,
        role=role,
        gender=gender,
        sex=_SEX_FOR_GENDER.get(gender, SEX_UNKNOWN),
        unknown=True,
    )


class LinkageAssigner:
    """
    Single pass that turns an unlinked Household into a Family.

    Works on FamilyMember values only; each step replaces members with
    updated copies. One assigner per family; not reusable.
    """

    def __init__(self, household: Household):
        self._lineage: Dict[Role, FamilyMember] = dict(household.singles)
        self._groups: Dict[Role, List[FamilyMember]] = {
            role: list(household.group(role)) for role in MULTI_ROLES
        }
        self._placeholders: Dict[int, FamilyMember] = {}
        self._next_id = FIRST_GENERATED_ID

    # ---------------------------------------------------------
    # Public
    # ---------------------------------------------------------

    def assign(self) -> Family:
        if Role.PROBAND not in self._lineage:
            raise MissingProbandError("Cannot build a pedigree without a Proband record")

        self._override_proband_gender()
        self._place_lineage()
        self._backfill_lineage()
        self._link_lineage()

        children = self._assign_children()
        siblings = self._assign_siblings()
        maternal = self._assign_aunts_uncles(
            Role.MOTHERS_SIBLING, MATERNAL_GRANDFATHER_ID, MATERNAL_GRANDMOTHER_ID
        )
        paternal = self._assign_aunts_uncles(
            Role.FATHERS_SIBLING, PATERNAL_GRANDFATHER_ID, PATERNAL_GRANDMOTHER_ID
        )

        members: List[FamilyMember] = []
        members.extend(self._placeholders[pid] for pid in sorted(self._placeholders))
        members.extend(self._lineage[role] for role in LINEAGE_ORDER if role in self._lineage)
        members.extend(children)
        members.extend(siblings)
        members.extend(maternal)
        members.extend(paternal)

        log.debug(
            "Assigned %d members (%d placeholders, %d children, %d siblings, %d aunts/uncles)",
            len(members),
            len(self._placeholders) + sum(1 for m in self._lineage.values() if m.unknown),
            len(children),
            len(siblings),
            len(maternal) + len(paternal),
        )
        return Family(members=members)

    # ---------------------------------------------------------
    # Lineage (fixed IDs)
    # ---------------------------------------------------------

    @property
    def _proband(self) -> FamilyMember:
        return self._lineage[Role.PROBAND]

    def _override_proband_gender(self) -> None:
        # The renderer can only draw a binary-sex parent, so a proband of
        # "other" gender with children is drawn as the mother.
        proband = self._proband
        if proband.gender == OTHER and self._groups[Role.CHILD]:
            log.debug("Proband gender 'other' with children; drawing as female")
            self._lineage[Role.PROBAND] = replace(proband, gender=FEMALE, sex=SEX_FEMALE)

    def _place_lineage(self) -> None:
        for role, member in self._lineage.items():
            self._lineage[role] = replace(member, id=FIXED_IDS[role], name=DISPLAY_NAMES[role])

    def _synthesize(self, role: Role) -> None:
        log.debug("Synthesizing unknown %s (id=%d)", role.value, FIXED_IDS[role])
        self._lineage[role] = _unknown_member(
            FIXED_IDS[role], _GENDER_FOR_ROLE[role], DISPLAY_NAMES[role], role
        )

    def _backfill_lineage(self) -> None:
        """Fill in missing parents and grandparents so every branch connects."""
        for parent in (Role.FATHER, Role.MOTHER):
            if parent not in self._lineage:
                self._synthesize(parent)

        for _, grandparents, collateral in _SIDES:
            side_reported = (
                any(gp in self._lineage for gp in grandparents)
                or bool(self._groups[collateral])
            )
            if not side_reported:
                continue
            for gp in grandparents:
                if gp not in self._lineage:
                    self._synthesize(gp)

    def _link_lineage(self) -> None:
        lineage = self._lineage
        for parent, (grandfather, grandmother), _ in _SIDES:
            lineage[parent] = replace(
                lineage[parent],
                dad_id=FIXED_IDS[grandfather] if grandfather in lineage else NO_PARENT,
                mom_id=FIXED_IDS[grandmother] if grandmother in lineage else NO_PARENT,
            )

        lineage[Role.PROBAND] = replace(
            lineage[Role.PROBAND],
            dad_id=FATHER_ID if Role.FATHER in lineage else NO_PARENT,
            mom_id=MOTHER_ID if Role.MOTHER in lineage else NO_PARENT,
        )

    # ---------------------------------------------------------
    # Generated IDs
    # ---------------------------------------------------------

    def _take_id(self) -> int:
        member_id = self._next_id
        self._next_id += 1
        return member_id

    def _placeholder(self, placeholder: Placeholder) -> int:
        if placeholder.id not in self._placeholders:
            log.debug("Synthesizing placeholder %s (id=%d)", placeholder.name, placeholder.id)
            self._placeholders[placeholder.id] = _unknown_member(
                placeholder.id, placeholder.gender, placeholder.name
            )
        return placeholder.id

    def _assign_children(self) -> List[FamilyMember]:
        proband_is_male = self._proband.gender == MALE
        children = []
        for n, child in enumerate(self._groups[Role.CHILD], start=1):
            if proband_is_male:
                dad_id, mom_id = PROBAND_ID, self._placeholder(UNKNOWN_WIFE)
            else:
                dad_id, mom_id = self._placeholder(UNKNOWN_HUSBAND), PROBAND_ID
            children.append(
                replace(child, id=self._take_id(), name=f"Child_{n}", dad_id=dad_id, mom_id=mom_id)
            )
        return children

    def _assign_siblings(self) -> List[FamilyMember]:
        siblings = []
        for n, sibling in enumerate(self._groups[Role.SIBLING], start=1):
            shared = (sibling.shared_parent or "").lower()
            if shared == "father":
                dad_id, mom_id = FATHER_ID, self._placeholder(UNKNOWN_MOTHER)
            elif shared == "mother":
                dad_id, mom_id = self._placeholder(UNKNOWN_FATHER), MOTHER_ID
            else:
                dad_id, mom_id = FATHER_ID, MOTHER_ID
            siblings.append(
                replace(sibling, id=self._take_id(), name=f"Sibling_{n}", dad_id=dad_id, mom_id=mom_id)
            )
        return siblings

    def _assign_aunts_uncles(self, role: Role, dad_id: int, mom_id: int) -> List[FamilyMember]:
        counters = {SEX_MALE: 0, SEX_FEMALE: 0, SEX_UNKNOWN: 0}
        prefixes = {SEX_MALE: "Uncle", SEX_FEMALE: "Aunt", SEX_UNKNOWN: "Sibling"}
        members = []
        for relative in self._groups[role]:
            sex = relative.sex if relative.sex in counters else SEX_UNKNOWN
            counters[sex] += 1
            members.append(
                replace(
                    relative,
                    id=self._take_id(),
                    name=f"{prefixes[sex]}_{counters[sex]}",
                    dad_id=dad_id,
                    mom_id=mom_id,
                )
            )
        return members


def assign_family(household: Household) -> Family:
    """Number, link and name every member of ``household``."""
    return LinkageAssigner(household).assign()
