"""
pedigree_writer.py
Tab-delimited pedigree text for the external pedigree renderer.

Document layout:

    Ped  ID  Sex  Dadid  Momid  Status  Label  ul  ur  ll  lr
    1    7   1    5      6      0       Respondent-Age_40  0  0  0  0

The renderer reads the format positionally, so every byte matters:
- the label column is at most 75 characters; longer labels are cut and
  padded with two spaces in place of the column tab
- placeholders and negative IDs get "NA" in all four quadrant columns
"""

from __future__ import annotations

from typing import Iterable, List

from pedigree_builder.cancers import (
    CANCER_TYPES,
    OTHER_CANCER_KEY,
    QUADRANTS,
)
from pedigree_builder.family.entities import Family, FamilyMember

PEDIGREE_GROUP = "1"
HEADER_COLUMNS = ("Ped", "ID", "Sex", "Dadid", "Momid", "Status", "Label", "ul", "ur", "ll", "lr")
HEADER = "\t".join(HEADER_COLUMNS)

LABEL_FIELD_WIDTH = 75
TRUNCATION_PAD = "  "
NOT_APPLICABLE = "NA"

ASHKENAZI_CATEGORIES = frozenset({"Both_Parents", "Maternal", "Paternal"})


def _other_cancer_label(member: FamilyMember) -> str:
    history = member.cancer(OTHER_CANCER_KEY)
    subtype = member.other_cancer_type
    if history.value is None and not subtype:
        return ""

    if history.is_multiple:
        parts = []
        if history.value is not None:
            parts.append(f"-Other*_{history.value}")
        if subtype:
            parts.append(f"-Other__({subtype}*)")
        return "".join(parts)

    label = "-Other_"
    if history.value is not None:
        label += history.value
    if subtype:
        label += f"_({subtype})"
    return label


def build_label(member: FamilyMember) -> str:
    """Human-readable label: name, age, cancers in catalogue order, ancestry."""
    parts: List[str] = [member.name]

    if member.age:
        parts.append(f"-Age_{member.age}")

    for ctype in CANCER_TYPES:
        if ctype.key == OTHER_CANCER_KEY:
            parts.append(_other_cancer_label(member))
            continue
        history = member.cancer(ctype.key)
        if history.value is None:
            continue
        star = "*" if ctype.tracks_multiple and history.is_multiple else ""
        parts.append(f"-{ctype.tag}{star}_{history.value}")

    if member.ashkenazi in ASHKENAZI_CATEGORIES:
        parts.append(f"-Ashkenazi:_{member.ashkenazi}")

    return "".join(parts)


def label_field(label: str) -> str:
    """
    The label column including its trailing separator.

    The separator tab counts toward the 75-character width. Over-wide
    fields are cut to 75 characters (dropping the tab) and padded with
    two spaces.
    """
    field = label.replace(" ", "_") + "\t"
    if len(field) > LABEL_FIELD_WIDTH:
        return field[:LABEL_FIELD_WIDTH] + TRUNCATION_PAD
    return field


def quadrant_flags(member: FamilyMember) -> List[str]:
    """ul/ur/ll/lr flags: "1" if any cancer of that quadrant is recorded."""
    if not member.is_drawn_with_quadrants:
        return [NOT_APPLICABLE] * len(QUADRANTS)

    lit = {
        ctype.quadrant
        for ctype in CANCER_TYPES
        if member.cancer(ctype.key).recorded
    }
    return ["1" if q in lit else "0" for q in QUADRANTS]


def format_member(member: FamilyMember) -> str:
    """One newline-terminated pedigree row."""
    columns = [
        PEDIGREE_GROUP,
        str(member.id),
        str(member.sex),
        str(member.dad_id),
        str(member.mom_id),
        str(member.status),
    ]
    return (
        "\t".join(columns)
        + "\t"
        + label_field(build_label(member))
        + "\t".join(quadrant_flags(member))
        + "\n"
    )


def serialize_members(members: Iterable[FamilyMember]) -> str:
    return HEADER + "\n" + "".join(format_member(m) for m in members)


def serialize_family(family: Family) -> str:
    """Render the whole pedigree document, header first, in emission order."""
    return serialize_members(family.members)
