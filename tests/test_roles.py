from pedigree_builder.family.roles import MULTI_ROLES, SINGLETON_ROLES, Role, route_step


def test_known_steps_route_to_roles():
    assert route_step("Proband").role is Role.PROBAND
    assert route_step("Maternal Grandmother").role is Role.MATERNAL_GRANDMOTHER
    assert route_step("Mother's Sibling").role is Role.MOTHERS_SIBLING
    assert route_step("Father's Sibling").role is Role.FATHERS_SIBLING


def test_non_relationship_step_is_not_found():
    result = route_step("Demographics")
    assert not result.found
    assert result.role is None
    assert result.step == "Demographics"


def test_missing_step_is_not_found():
    assert not route_step(None).found
    assert not route_step("").found


def test_step_names_are_exact():
    # Survey step names are fixed strings; no fuzzy matching
    assert not route_step("proband").found
    assert not route_step("Mothers Sibling").found


def test_role_occupancy():
    assert Role.PROBAND.is_singleton
    assert Role.PATERNAL_GRANDFATHER.is_singleton
    assert not Role.CHILD.is_singleton
    assert set(MULTI_ROLES) == {Role.CHILD, Role.SIBLING, Role.MOTHERS_SIBLING, Role.FATHERS_SIBLING}
    assert len(SINGLETON_ROLES) == 7
