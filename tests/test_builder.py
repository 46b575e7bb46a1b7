import logging

import pytest

from pedigree_builder import build_pedigree
from pedigree_builder.core.exceptions import MissingProbandError
from pedigree_builder.family.builder import PedigreeBuilder
from pedigree_builder.records import FactRecord, load_fact_records
from pedigree_builder.utils import pathing


def make_record(step, **columns):
    return FactRecord.from_mapping({"step": step, **columns})


def test_half_sibling_with_cancer_document():
    records = [
        make_record("Proband", relationship=0, gender="Male", age=40, breast_cancer="false"),
        make_record(
            "Sibling",
            step_instance=1,
            relationship=2,
            shared_parent="mother",
            breast_cancer="true",
            breast_cancer_age=38,
            age=38,
        ),
    ]

    document, has_multiple = build_pedigree(records)

    assert document == (
        "Ped\tID\tSex\tDadid\tMomid\tStatus\tLabel\tul\tur\tll\tlr\n"
        "1\t-1\t1\t0\t0\t0\tUnknown_Father\tNA\tNA\tNA\tNA\n"
        "1\t5\t1\t0\t0\t0\tFather\tNA\tNA\tNA\tNA\n"
        "1\t6\t2\t0\t0\t0\tMother\tNA\tNA\tNA\tNA\n"
        "1\t7\t1\t5\t6\t0\tRespondent-Age_40\t0\t0\t0\t0\n"
        "1\t8\t3\t-1\t6\t0\tSibling_1-Age_38-Breast_38\t1\t0\t0\t0\n"
    )
    assert has_multiple is False


def test_full_family_export():
    document, has_multiple = build_pedigree(load_fact_records(pathing.tests_data_path("facts_family.json")))

    assert document.splitlines() == [
        "Ped\tID\tSex\tDadid\tMomid\tStatus\tLabel\tul\tur\tll\tlr",
        "1\t-3\t1\t0\t0\t0\tUnknown\tNA\tNA\tNA\tNA",
        "1\t-2\t2\t0\t0\t0\tUnknown_Mother\tNA\tNA\tNA\tNA",
        "1\t1\t1\t0\t0\t0\tGrandfather\tNA\tNA\tNA\tNA",
        "1\t2\t2\t0\t0\t0\tGrandmother\tNA\tNA\tNA\tNA",
        "1\t3\t1\t0\t0\t0\tGrandfather\tNA\tNA\tNA\tNA",
        "1\t4\t2\t0\t0\t1\tGrandmother\t0\t0\t0\t0",
        "1\t5\t1\t1\t2\t0\tFather\tNA\tNA\tNA\tNA",
        "1\t6\t2\t3\t4\t1\tMother-Age_70-Ovarian_unk._age\t0\t0\t0\t1",
        "1\t7\t2\t5\t6\t0\tRespondent-Age_45-Breast*_42-Ashkenazi:_Both_Parents\t1\t0\t0\t0",
        "1\t8\t1\t-3\t7\t0\tChild_1-Age_20\t0\t0\t0\t0",
        "1\t9\t2\t-3\t7\t0\tChild_2-Age_17\t0\t0\t0\t0",
        "1\t10\t1\t5\t-2\t0\tSibling_1-Age_50\t0\t0\t0\t0",
        "1\t11\t1\t3\t4\t0\tUncle_1-Age_66-Colon_60\t0\t1\t0\t0",
        "1\t12\t2\t1\t2\t0\tAunt_1\t0\t0\t0\t0",
    ]
    assert has_multiple is True


def test_csv_export_with_other_cancer():
    document, has_multiple = build_pedigree(load_fact_records(pathing.tests_data_path("facts_small.csv")))

    assert document.splitlines()[1:] == [
        "1\t-4\t2\t0\t0\t0\tUnknown\tNA\tNA\tNA\tNA",
        "1\t1\t1\t0\t0\t1\tGrandfather\t0\t0\t0\t0",
        "1\t2\t2\t0\t0\t0\tGrandmother\tNA\tNA\tNA\tNA",
        "1\t5\t1\t1\t2\t1\tFather-Age_80-Lung_71-Other_unk._age_(bone)\t0\t0\t1\t1",
        "1\t6\t2\t0\t0\t0\tMother\tNA\tNA\tNA\tNA",
        "1\t7\t1\t5\t6\t0\tRespondent-Age_52\t0\t0\t0\t0",
        "1\t8\t2\t7\t-4\t0\tChild_1-Age_25\t0\t0\t0\t0",
    ]
    assert has_multiple is False


def test_build_is_deterministic():
    records = load_fact_records(pathing.tests_data_path("facts_family.json"))
    assert build_pedigree(records) == build_pedigree(records)


def test_non_relationship_steps_are_skipped():
    builder = PedigreeBuilder()
    assert builder.add_record(make_record("Demographics", race="Asian")) is False
    assert builder.add_record(make_record("Proband", gender="Female")) is True

    result = builder.build()
    assert result.skipped_steps == ["Demographics"]
    assert len(result.family) == 3


def test_rows_for_one_person_are_merged():
    records = [
        make_record("Proband", gender="Female"),
        make_record("Mother", age=61),
        make_record("Mother", gender="Female", breast_cancer="true", breast_cancer_age=55),
    ]

    result = PedigreeBuilder().add_records(records).build()
    mother = result.family.by_id(6)
    assert mother.age == "61"
    assert mother.sex == 2
    assert "Mother-Age_61-Breast_55\t1\t0\t0\t0\n" in result.document


def test_multiple_testicular_cancer_counts():
    _, has_multiple = build_pedigree(
        [
            make_record("Proband", gender="Male"),
            make_record(
                "Father",
                testicular_cancer="true",
                multiple_testicular_cancers="true",
            ),
        ]
    )
    assert has_multiple is True


def test_multiple_flag_is_kept_without_diagnosis():
    document, has_multiple = build_pedigree(
        [make_record("Proband", gender="Male", lung_cancer="false", multiple_lung_cancers="true")]
    )
    assert has_multiple is True
    assert "1\t7\t1\t5\t6\t0\tRespondent\t0\t0\t0\t0\n" in document


def test_missing_proband_raises():
    with pytest.raises(MissingProbandError):
        build_pedigree([make_record("Mother", gender="Female")])


def test_empty_input_raises():
    with pytest.raises(MissingProbandError):
        build_pedigree([])


def test_build_logs_nothing_above_debug(caplog):
    records = load_fact_records(pathing.tests_data_path("facts_family.json"))
    base = logging.getLogger("pedigree_builder")
    base.addHandler(caplog.handler)
    caplog.clear()
    try:
        build_pedigree(records)
    finally:
        base.removeHandler(caplog.handler)

    assert [r.getMessage() for r in caplog.records if r.levelno >= logging.INFO] == []
