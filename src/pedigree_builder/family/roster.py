from __future__ import annotations

from typing import Dict, Iterator

from pedigree_builder.family.accumulator import PersonAccumulator
from pedigree_builder.family.entities import Household
from pedigree_builder.family.roles import MULTI_ROLES, Role
from pedigree_builder.records.fact_record import FactRecord


class RoleRoster:
    """
    Request-scoped set of accumulators, one per role occupant.

    Singleton roles hold at most one accumulator. Multi-occupancy roles are
    keyed by step name + instance number and keep first-seen order.
    """

    def __init__(self):
        self._singles: Dict[Role, PersonAccumulator] = {}
        self._groups: Dict[Role, Dict[str, PersonAccumulator]] = {
            role: {} for role in MULTI_ROLES
        }

    def person_for(self, role: Role, record: FactRecord) -> PersonAccumulator:
        """Return the accumulator ``record`` belongs to, creating it on first use."""
        if role.is_singleton:
            person = self._singles.get(role)
            if person is None:
                person = self._singles[role] = PersonAccumulator(role)
            return person

        group = self._groups[role]
        key = record.slot_key
        person = group.get(key)
        if person is None:
            person = group[key] = PersonAccumulator(role, key)
        return person

    def get(self, role: Role) -> PersonAccumulator | None:
        return self._singles.get(role)

    def group(self, role: Role) -> list[PersonAccumulator]:
        return list(self._groups.get(role, {}).values())

    def __iter__(self) -> Iterator[PersonAccumulator]:
        yield from self._singles.values()
        for group in self._groups.values():
            yield from group.values()

    def __len__(self) -> int:
        return len(self._singles) + sum(len(g) for g in self._groups.values())

    def snapshot(self) -> Household:
        """Finalize every accumulator into an unlinked Household."""
        return Household(
            singles={role: p.finalize() for role, p in self._singles.items()},
            groups={
                role: [p.finalize() for p in group.values()]
                for role, group in self._groups.items()
            },
        )
