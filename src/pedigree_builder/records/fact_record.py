# src/pedigree_builder/records/fact_record.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from pedigree_builder.cancers import CANCER_TYPES, OTHER_CANCER_NAME_COLUMN
from pedigree_builder.core.exceptions import RecordLoadError


@dataclass(frozen=True, slots=True)
class CancerFact:
    """
    One cancer type as answered for one relationship slot.

    Attributes:
        occurred: Raw yes/no answer ("true"/"false") or None if not asked.
        age: Age at diagnosis, if given.
        multiple: Raw "more than one of this type" answer, or None.
    """
    occurred: Optional[str] = None
    age: Optional[int] = None
    multiple: Optional[str] = None


@dataclass(frozen=True, slots=True)
class FactRecord:
    """
    A single survey row describing one relationship-slot occurrence.

    Rows arrive already filtered to one respondent and sorted by
    relationship degree, then step name.
    """
    step: str
    step_instance: Optional[int] = None
    relationship: Optional[int] = None

    age: Optional[int] = None
    gender: Optional[str] = None
    vital_status: Optional[str] = None
    shared_parent: Optional[str] = None
    ashkenazi: Optional[str] = None

    cancers: Dict[str, CancerFact] = field(default_factory=dict)
    other_cancer_name: Optional[str] = None

    # Survey columns the builder does not use (race, latinx, ...)
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def slot_key(self) -> str:
        """Key that tells repeated occupants of one role apart."""
        instance = "" if self.step_instance is None else str(self.step_instance)
        return f"{self.step}{instance}"

    def cancer(self, key: str) -> CancerFact:
        return self.cancers.get(key) or CancerFact()

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "FactRecord":
        """
        Build a record from a flat column -> value mapping.

        Empty strings are treated as missing. Numeric columns accept ints or
        numeric strings.
        """
        data = {k: _blank_to_none(v) for k, v in row.items()}

        step = data.get("step")
        if not step:
            raise RecordLoadError(f"Fact record is missing a step name: {dict(row)!r}")

        cancers: Dict[str, CancerFact] = {}
        consumed = {
            "step", "step_instance", "relationship", "age", "gender",
            "vital_status", "shared_parent", "ashkenazi", OTHER_CANCER_NAME_COLUMN,
        }
        for ctype in CANCER_TYPES:
            consumed.update({ctype.column, ctype.age_column})
            multiple = None
            if ctype.multiple_column:
                consumed.add(ctype.multiple_column)
                multiple = _as_text(data.get(ctype.multiple_column))

            fact = CancerFact(
                occurred=_as_text(data.get(ctype.column)),
                age=_as_int(data.get(ctype.age_column), ctype.age_column),
                multiple=multiple,
            )
            if fact != CancerFact():
                cancers[ctype.key] = fact

        return cls(
            step=str(step),
            step_instance=_as_int(data.get("step_instance"), "step_instance"),
            relationship=_as_int(data.get("relationship"), "relationship"),
            age=_as_int(data.get("age"), "age"),
            gender=_as_text(data.get("gender")),
            vital_status=_as_text(data.get("vital_status")),
            shared_parent=_as_text(data.get("shared_parent")),
            ashkenazi=_as_text(data.get("ashkenazi")),
            cancers=cancers,
            other_cancer_name=_as_text(data.get(OTHER_CANCER_NAME_COLUMN)),
            extra={k: v for k, v in data.items() if k not in consumed},
        )


# ---------------------------------------------------------
# Column coercion
# ---------------------------------------------------------

def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    # JSON exports carry real booleans for yes/no columns
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _as_int(value: Any, column: str) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool):
        raise RecordLoadError(f"Column {column!r} expects a number, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    text = str(value).strip()
    try:
        return int(text)
    except ValueError:
        try:
            number = float(text)
        except ValueError:
            raise RecordLoadError(
                f"Column {column!r} expects a number, got {value!r}"
            ) from None
        if not number.is_integer():
            raise RecordLoadError(f"Column {column!r} expects a whole number, got {value!r}")
        return int(number)
