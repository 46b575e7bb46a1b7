"""
Legend text shown under a rendered pedigree.

The report layer draws the pedigree image and prints these notes beneath
it; the multiple-diagnoses note only appears when a "*" can occur in the
labels.
"""

from __future__ import annotations

from typing import List

RESPONDENT_NOTE = "green = respondent"
CANCER_NOTE = "red = family member with cancer"
MULTIPLE_DIAGNOSES_NOTE = "* Indicates multiple diagnoses of the same cancer type."


def legend_notes(has_multiple_cancers: bool) -> List[str]:
    notes = [RESPONDENT_NOTE, CANCER_NOTE]
    if has_multiple_cancers:
        notes.append(MULTIPLE_DIAGNOSES_NOTE)
    return notes
