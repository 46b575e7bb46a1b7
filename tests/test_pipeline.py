import json
import logging

import pytest

from pedigree_builder import build_pedigree
from pedigree_builder.config import get_config, load_config, reset_config
from pedigree_builder.core.context import BuildContext
from pedigree_builder.core.exceptions import MissingProbandError, PipelineError
from pedigree_builder.core.pipeline import Pipeline
from pedigree_builder.logger import configure_logging, get_logger
from pedigree_builder.main import run
from pedigree_builder.records import FactRecord
from pedigree_builder.utils import pathing


def make_context(tmp_path, input_path, json_path=None):
    return BuildContext(
        config=None,
        logger=get_logger("pedigree_builder.tests"),
        input_path=str(input_path),
        output_path=str(tmp_path / "pedigree.ped"),
        json_path=json_path,
    )


def test_pipeline_writes_pedigree_and_stats(tmp_path):
    ctx = make_context(
        tmp_path, pathing.tests_data_path("facts_family.json"), str(tmp_path / "family.json")
    )

    result = Pipeline(ctx).run()

    assert (tmp_path / "pedigree.ped").read_text(encoding="utf-8") == result.document
    assert json.loads((tmp_path / "family.json").read_text(encoding="utf-8"))["count"] == 14
    assert ctx.stats == {
        "records": 9,
        "skipped": 1,
        "members": 14,
        "has_multiple_cancers": True,
    }


def test_pipeline_wraps_build_errors(tmp_path):
    path = tmp_path / "facts.json"
    path.write_text(json.dumps([{"step": "Mother", "relationship": 1}]), encoding="utf-8")

    with pytest.raises(PipelineError) as excinfo:
        Pipeline(make_context(tmp_path, path)).run()

    assert isinstance(excinfo.value.__cause__, MissingProbandError)
    assert not (tmp_path / "pedigree.ped").exists()


def test_pipeline_wraps_load_errors(tmp_path):
    with pytest.raises(PipelineError):
        Pipeline(make_context(tmp_path, tmp_path / "missing.json")).run()


def test_main_run_writes_output(tmp_path):
    out = tmp_path / "out" / "pedigree.ped"
    run(str(pathing.tests_data_path("facts_small.csv")), str(out), None, False)

    lines = out.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("Ped\tID")
    assert len(lines) == 8


def test_load_config_from_env_override(tmp_path, monkeypatch):
    path = tmp_path / "custom.yml"
    path.write_text("paths:\n  outputs_dir: elsewhere\ndebug: true\n", encoding="utf-8")
    monkeypatch.setenv("PEDIGREE_BUILDER_CONFIG", str(path))

    cfg = load_config()
    assert cfg.paths["outputs_dir"] == "elsewhere"
    assert cfg.debug is True
    assert cfg.logging == {}


def test_load_config_missing_file(tmp_path, monkeypatch):
    monkeypatch.setenv("PEDIGREE_BUILDER_CONFIG", str(tmp_path / "nope.yml"))
    with pytest.raises(FileNotFoundError):
        load_config()


def test_main_run_debug_flag_lowers_log_level(tmp_path):
    builder_log = logging.getLogger("pedigree_builder.family.builder")
    try:
        run(str(pathing.tests_data_path("facts_small.csv")), str(tmp_path / "p.ped"), None, True)
        assert builder_log.getEffectiveLevel() == logging.DEBUG
        assert logging.getLogger("pedigree_builder").level == logging.DEBUG
    finally:
        configure_logging(debug=False)

    assert builder_log.getEffectiveLevel() == logging.INFO


def test_builds_without_a_config_file(tmp_path, monkeypatch):
    monkeypatch.setenv("PEDIGREE_BUILDER_CONFIG", str(tmp_path / "missing.yml"))
    reset_config()
    try:
        cfg = get_config()
        assert cfg.source is None
        assert cfg.logging == {}
        assert cfg.debug is False

        document, has_multiple = build_pedigree(
            [FactRecord.from_mapping({"step": "Proband", "gender": "Male"})]
        )
        assert document.splitlines()[-1] == "1\t7\t1\t5\t6\t0\tRespondent\t0\t0\t0\t0"
        assert has_multiple is False
    finally:
        reset_config()
