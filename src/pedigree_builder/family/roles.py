from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple


class Role(str, Enum):
    """Family role a survey step fills; the value is the survey step name."""

    PROBAND = "Proband"
    MOTHER = "Mother"
    FATHER = "Father"
    MATERNAL_GRANDMOTHER = "Maternal Grandmother"
    MATERNAL_GRANDFATHER = "Maternal Grandfather"
    PATERNAL_GRANDMOTHER = "Paternal Grandmother"
    PATERNAL_GRANDFATHER = "Paternal Grandfather"
    CHILD = "Child"
    SIBLING = "Sibling"
    MOTHERS_SIBLING = "Mother's Sibling"
    FATHERS_SIBLING = "Father's Sibling"

    @property
    def is_singleton(self) -> bool:
        return self not in MULTI_ROLES


MULTI_ROLES: Tuple[Role, ...] = (
    Role.CHILD,
    Role.SIBLING,
    Role.MOTHERS_SIBLING,
    Role.FATHERS_SIBLING,
)

SINGLETON_ROLES: Tuple[Role, ...] = tuple(r for r in Role if r not in MULTI_ROLES)

_ROLES_BY_STEP: Dict[str, Role] = {r.value: r for r in Role}


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Outcome of routing a step name; ``role`` is None for non-relationship steps."""
    step: str
    role: Optional[Role] = None

    @property
    def found(self) -> bool:
        return self.role is not None


def route_step(step: Optional[str]) -> RouteResult:
    """
    Map a survey step name to a family role.

    Steps that do not describe a relative (e.g. "Demographics") come back
    with found == False; callers skip those rows.
    """
    name = step or ""
    return RouteResult(step=name, role=_ROLES_BY_STEP.get(name))
