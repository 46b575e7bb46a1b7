from pedigree_builder.family.roles import Role
from pedigree_builder.family.roster import RoleRoster
from pedigree_builder.records.fact_record import FactRecord


def make_record(step, **columns):
    return FactRecord.from_mapping({"step": step, **columns})


def test_singleton_role_reuses_one_person():
    roster = RoleRoster()
    a = roster.person_for(Role.MOTHER, make_record("Mother", age=60))
    b = roster.person_for(Role.MOTHER, make_record("Mother", gender="Female"))

    assert a is b
    assert len(roster) == 1
    assert roster.get(Role.MOTHER) is a


def test_multi_role_keyed_by_instance():
    roster = RoleRoster()
    c1 = roster.person_for(Role.CHILD, make_record("Child", step_instance=1))
    c2 = roster.person_for(Role.CHILD, make_record("Child", step_instance=2))
    c1_again = roster.person_for(Role.CHILD, make_record("Child", step_instance=1))

    assert c1 is c1_again
    assert c1 is not c2
    assert roster.group(Role.CHILD) == [c1, c2]


def test_multi_role_keeps_first_seen_order():
    roster = RoleRoster()
    for instance in (3, 1, 2, 1):
        roster.person_for(Role.SIBLING, make_record("Sibling", step_instance=instance))

    assert [p.key for p in roster.group(Role.SIBLING)] == ["Sibling3", "Sibling1", "Sibling2"]


def test_snapshot_finalizes_every_person():
    roster = RoleRoster()
    rec = make_record("Proband", age=40)
    roster.person_for(Role.PROBAND, rec).merge(rec)
    rec = make_record("Mother's Sibling", step_instance=1, gender="Female")
    roster.person_for(Role.MOTHERS_SIBLING, rec).merge(rec)

    household = roster.snapshot()

    assert household.get(Role.PROBAND).age == "40"
    assert household.get(Role.FATHER) is None
    assert [m.sex for m in household.group(Role.MOTHERS_SIBLING)] == [2]
    assert household.group(Role.CHILD) == []
