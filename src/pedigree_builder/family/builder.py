"""
Pedigree construction entry point.

    document, has_multiple = build_pedigree(records)

FactRecords -> RoleRoster (route + merge) -> Household (finalize)
    -> LinkageAssigner -> Family -> pedigree document

A PedigreeBuilder is request scoped: build a new one for every respondent.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from pedigree_builder.exporter.pedigree_writer import serialize_family
from pedigree_builder.family.assigner import assign_family
from pedigree_builder.family.entities import Family
from pedigree_builder.family.roles import route_step
from pedigree_builder.family.roster import RoleRoster
from pedigree_builder.logging import get_logger
from pedigree_builder.records.fact_record import FactRecord

log = get_logger(__name__)


@dataclass(slots=True)
class PedigreeResult:
    document: str
    has_multiple_cancers: bool
    family: Family
    skipped_steps: List[str] = field(default_factory=list)


class PedigreeBuilder:
    def __init__(self):
        self.roster = RoleRoster()
        self.skipped_steps: List[str] = []
        self.records_seen = 0

    def add_record(self, record: FactRecord) -> bool:
        """Merge one record; returns False when its step is not a relative."""
        self.records_seen += 1
        route = route_step(record.step)
        if not route.found:
            # Demographics and other non-relationship steps
            log.debug("Skipping non-relationship step %r", record.step)
            self.skipped_steps.append(route.step)
            return False

        self.roster.person_for(route.role, record).merge(record)
        return True

    def add_records(self, records: Iterable[FactRecord]) -> "PedigreeBuilder":
        for record in records:
            self.add_record(record)
        return self

    def build_family(self) -> Family:
        return assign_family(self.roster.snapshot())

    def build(self) -> PedigreeResult:
        family = self.build_family()
        log.debug(
            "Built pedigree from %d records: %d people, %d members, %d skipped",
            self.records_seen,
            len(self.roster),
            len(family),
            len(self.skipped_steps),
        )
        return PedigreeResult(
            document=serialize_family(family),
            has_multiple_cancers=family.has_multiple_cancers(),
            family=family,
            skipped_steps=list(self.skipped_steps),
        )


def build_pedigree(records: Iterable[FactRecord]) -> Tuple[str, bool]:
    """
    Build the pedigree document for one respondent.

    Returns the tab-delimited document and whether any member reported
    multiple cancers of the same type. Raises MissingProbandError if no
    Proband record is present.
    """
    result = PedigreeBuilder().add_records(records).build()
    return result.document, result.has_multiple_cancers
