"""
Per-person accumulation of survey rows.

A relative can be described by several rows (one per survey page); each row
is merged into the same PersonAccumulator. Once every row has been seen,
``finalize()`` produces an immutable FamilyMember value. The accumulator never
hands out a live member it keeps mutating.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, Optional

from pedigree_builder.cancers import (
    CANCER_TYPES,
    OTHER_CANCER_KEY,
    UNKNOWN_AGE,
    is_affirmative,
)
from pedigree_builder.family.entities import (
    SEX_FEMALE,
    SEX_MALE,
    SEX_UNKNOWN,
    STATUS_ALIVE,
    STATUS_DECEASED,
    CancerHistory,
    FamilyMember,
)
from pedigree_builder.family.roles import Role
from pedigree_builder.records.fact_record import FactRecord

_SEX_CODES: Dict[str, int] = {
    "male": SEX_MALE,
    "female": SEX_FEMALE,
    "other": SEX_UNKNOWN,
}

_STATUS_CODES: Dict[str, int] = {
    "alive": STATUS_ALIVE,
    "deceased": STATUS_DECEASED,
}


class PersonAccumulator:
    """Merged demographics and cancer history for one role occupant."""

    def __init__(self, role: Role, key: Optional[str] = None):
        self.role = role
        self.key = key or role.value

        self.age: str = ""
        self.gender: Optional[str] = None
        self.sex: int = SEX_UNKNOWN
        self.vital_status: Optional[str] = None
        self.status: int = STATUS_ALIVE
        self.shared_parent: Optional[str] = None
        self.ashkenazi: Optional[str] = None

        self.cancers: Dict[str, CancerHistory] = {}
        self.other_cancer_type: str = ""

        self.records_merged = 0

    def __repr__(self) -> str:
        return f"PersonAccumulator(role={self.role.value!r}, key={self.key!r})"

    # ---------------------------------------------------------
    # Demographics
    # ---------------------------------------------------------

    def set_age(self, age: Optional[int]) -> None:
        if age is not None:
            self.age = str(age)

    def set_gender(self, gender: Optional[str]) -> None:
        if not gender:
            return
        self.gender = gender.lower()
        # Unrecognized answers keep the previous sex code
        self.sex = _SEX_CODES.get(self.gender, self.sex)

    def set_vital_status(self, vital_status: Optional[str]) -> None:
        if not vital_status:
            return
        self.vital_status = vital_status.lower()
        self.status = _STATUS_CODES.get(self.vital_status, self.status)

    def set_ashkenazi(self, ashkenazi: Optional[str]) -> None:
        if ashkenazi:
            self.ashkenazi = ashkenazi.replace(" ", "_")

    # ---------------------------------------------------------
    # Cancer history
    # ---------------------------------------------------------

    def record_cancer(self, key: str, age: Optional[int]) -> None:
        """Mark cancer ``key`` as reported, at ``age`` if known."""
        current = self.cancers.get(key) or CancerHistory()
        value = str(age) if age is not None else UNKNOWN_AGE
        self.cancers[key] = replace(current, value=value)

    def record_multiple(self, key: str, multiple: Optional[str]) -> None:
        """Keep the "more than one" answer verbatim whenever it was given."""
        if multiple is None:
            return
        current = self.cancers.get(key) or CancerHistory()
        self.cancers[key] = replace(current, multiple=multiple)

    def merge(self, record: FactRecord) -> None:
        """Fold one survey row into this person."""
        self.set_age(record.age)
        self.set_ashkenazi(record.ashkenazi)
        self.set_gender(record.gender)
        self.shared_parent = record.shared_parent
        self.set_vital_status(record.vital_status)

        for ctype in CANCER_TYPES:
            fact = record.cancer(ctype.key)
            if is_affirmative(fact.occurred):
                self.record_cancer(ctype.key, fact.age)
                if ctype.key == OTHER_CANCER_KEY and record.other_cancer_name:
                    self.other_cancer_type = record.other_cancer_name
            if ctype.tracks_multiple:
                self.record_multiple(ctype.key, fact.multiple)

        self.records_merged += 1

    # ---------------------------------------------------------
    # Output
    # ---------------------------------------------------------

    def finalize(self) -> FamilyMember:
        """Snapshot this person as an unlinked FamilyMember (id 0, no parents)."""
        return FamilyMember(
            role=self.role,
            gender=self.gender,
            sex=self.sex,
            status=self.status,
            age=self.age,
            ashkenazi=self.ashkenazi,
            shared_parent=self.shared_parent,
            cancers=dict(self.cancers),
            other_cancer_type=self.other_cancer_type,
        )
