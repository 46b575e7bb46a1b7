"""
Cancer-type catalogue shared by record loading, accumulation and the
pedigree writer.

Each entry ties together:
  - the survey columns a FactRecord carries for the type
  - the abbreviated tag used in pedigree labels
  - the quadrant of the pedigree symbol the type lights up

CANCER_TYPES is in label order; the writer walks it front to back.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

UNKNOWN_AGE = "unk. age"

# Quadrants of the pedigree symbol (ul, ur, ll, lr)
QUADRANT_A = "ul"
QUADRANT_B = "ur"
QUADRANT_C = "ll"
QUADRANT_D = "lr"

QUADRANTS: Tuple[str, ...] = (QUADRANT_A, QUADRANT_B, QUADRANT_C, QUADRANT_D)


@dataclass(frozen=True, slots=True)
class CancerType:
    key: str
    column: str
    age_column: str
    multiple_column: Optional[str]
    tag: str
    quadrant: str

    @property
    def tracks_multiple(self) -> bool:
        return self.multiple_column is not None


CANCER_TYPES: Tuple[CancerType, ...] = (
    CancerType("bladder", "bladder_cancer", "bladder_cancer_age",
            "multiple_bladder_cancers", "Bladder", QUADRANT_A),
    CancerType("breast", "breast_cancer", "breast_cancer_age",
            "multiple_breast_cancers", "Breast", QUADRANT_A),
    CancerType("colon_rectal", "colon_or_rectal_cancer", "colon_or_rectal_cancer_age",
            "multiple_colon_or_rectal_cancers", "Colon", QUADRANT_B),
    CancerType("endometrial_uterine", "endometrial_or_uterine_cancer",
            "endometrial_or_uterine_cancer_age",
            "multiple_endometrial_or_uterine_cancers", "Uterine", QUADRANT_C),
    CancerType("kidney_renal_cell", "kidney_renal_cell_cancer", "kidney_renal_cell_cancer_age",
            "multiple_kidney_renal_cell_cancers", "Kidney", QUADRANT_A),
    CancerType("leukemia", "leukemia", "leukemia_age",
            "multiple_leukemias", "Leukemia", QUADRANT_B),
    CancerType("lung", "lung_cancer", "lung_cancer_age",
            "multiple_lung_cancers", "Lung", QUADRANT_C),
    CancerType("lymphoma", "lymphoma", "lymphoma_age",
            "multiple_lymphomas", "Lymphoma", QUADRANT_C),
    CancerType("melanoma", "melanoma_skin_cancer", "melanoma_skin_cancer_age",
            "multiple_melanoma_skin_cancers", "Melanoma", QUADRANT_A),
    CancerType("non_melanoma", "nonmelanoma_skin_cancer", "nonmelanoma_skin_cancer_age",
            "multiple_nonmelanoma_skin_cancers", "Non-Melanoma", QUADRANT_A),
    CancerType("oral_throat", "oral_cavity_or_throat_cancer", "oral_cavity_or_throat_cancer_age",
            "multiple_oral_cavity_or_throat_cancers", "Oral", QUADRANT_B),
    CancerType("other", "other_cancer", "other_age",
            "multiple_other_cancers", "Other", QUADRANT_D),
    CancerType("ovarian", "ovarian_cancer", "ovarian_cancer_age",
            "multiple_ovarian_cancers", "Ovarian", QUADRANT_D),
    CancerType("pancreatic", "pancreatic_cancer", "pancreatic_cancer_age",
            "multiple_pancreatic_cancers", "Pancreatic", QUADRANT_B),
    CancerType("prostate", "prostate_cancer", "prostate_cancer_age",
            "multiple_prostate_cancers", "Prostate", QUADRANT_C),
    CancerType("stomach", "stomach_cancer", "stomach_cancer_age",
            "multiple_stomach_cancers", "Stomach", QUADRANT_D),
    CancerType("testicular", "testicular_cancer", "testicular_cancer_age",
            "multiple_testicular_cancers", "Testicular", QUADRANT_D),
    CancerType("thyroid", "thyroid_cancer", "thyroid_cancer_age",
            "multiple_thyroid_cancers", "Thyroid", QUADRANT_C),
    # No "multiple" question is asked for an unknown cancer type.
    CancerType("unknown", "unknown_cancer", "unknown_cancer_age",
            None, "Unknown", QUADRANT_D),
)

CANCERS_BY_KEY: Dict[str, CancerType] = {c.key: c for c in CANCER_TYPES}

OTHER_CANCER_KEY = "other"
OTHER_CANCER_NAME_COLUMN = "other_cancer_name"


def get_cancer_type(key: str) -> CancerType:
    try:
        return CANCERS_BY_KEY[key]
    except KeyError:
        raise KeyError(f"Unknown cancer type: {key!r}") from None


def is_affirmative(value: Optional[str]) -> bool:
    """Survey yes/no columns hold the strings "true"/"false"."""
    return value is not None and str(value).lower() == "true"
