from __future__ import annotations

import logging
from pathlib import Path

import pytest

from conftest import FakeEngine, FakeSource, layer, write_cell
from s57_extract.common import CellOpenError, ConstantRule, FieldCastRule
from s57_extract.inspector import DEFAULT_OPEN_OPTIONS, CellInspector, inspect_cell
from s57_extract.rules import build_depth_registry, build_name_registry


def test_plan_contains_only_present_registry_layers_in_registry_order() -> None:
    source = FakeSource(
        Path("US5XX01M.000"),
        {
            "SOUNDG": layer(["DEPTH"]),
            "LNDARE": layer(["OBJNAM"]),
            "BUAARE": layer(["OBJNAM"]),
        },
    )

    plan = inspect_cell(source, build_depth_registry())

    assert [item.layer_name for item in plan.layers] == ["LNDARE", "SOUNDG"]
    assert plan.layers[0].rule == ConstantRule(-1)
    assert plan.layers[1].rule == FieldCastRule("DEPTH")
    assert plan.missing_field_layers == ()


def test_layer_without_required_field_is_skipped_with_warning(caplog: pytest.LogCaptureFixture) -> None:
    source = FakeSource(
        Path("US5XX01M.000"),
        {"DEPARE": layer(["DRVAL2"]), "WRECKS": layer(["VALSOU"])},
    )

    with caplog.at_level(logging.WARNING):
        plan = inspect_cell(source, build_depth_registry())

    assert [item.layer_name for item in plan.layers] == ["WRECKS"]
    assert plan.missing_field_layers == ("DEPARE",)
    assert "DRVAL1" in caplog.text


def test_field_lookup_ignores_case() -> None:
    source = FakeSource(Path("US5XX01M.000"), {"SEAARE": layer(["nobjnm"])})

    plan = inspect_cell(source, build_name_registry())

    assert [item.layer_name for item in plan.layers] == ["SEAARE"]


def test_cell_without_target_layers_gives_empty_plan() -> None:
    source = FakeSource(Path("US5XX01M.000"), {"BUAARE": layer([])})

    assert inspect_cell(source, build_depth_registry()).is_empty


def test_inspector_opens_with_split_and_soundg_options(tmp_path: Path) -> None:
    engine = FakeEngine()
    cell = write_cell(tmp_path / "US5XX01M.000", {"LNDARE": layer([])})

    plan = CellInspector(engine).inspect(cell, build_depth_registry())

    assert engine.opened == [(cell, DEFAULT_OPEN_OPTIONS)]
    assert "SPLIT_MULTIPOINT=ON" in DEFAULT_OPEN_OPTIONS
    assert "ADD_SOUNDG_DEPTH=ON" in DEFAULT_OPEN_OPTIONS
    assert [item.layer_name for item in plan.layers] == ["LNDARE"]


def test_inspector_propagates_open_failure(tmp_path: Path) -> None:
    broken = tmp_path / "BROKEN01.000"
    broken.write_bytes(b"\x00\x01not a cell")

    with pytest.raises(CellOpenError):
        CellInspector(FakeEngine()).inspect(broken, build_depth_registry())
