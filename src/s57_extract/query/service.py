"""SQL synthesis for one cell plan."""

from __future__ import annotations

from s57_extract.common import (
    GEOMETRY_COLUMN,
    LAYER_COLUMN,
    LEVEL_COLUMN,
    CellPlan,
    ConstantRule,
    ExtractionRule,
    FieldCastRule,
    FieldFilterRule,
)

DEFAULT_TOLERANCE = 0.00025
DEFAULT_LEVEL = "0"
UNION = " UNION ALL "


def level_code(file_name: str) -> str:
    """Third character of the cell file name, ``'0'`` for shorter names."""
    return file_name[2] if len(file_name) >= 3 else DEFAULT_LEVEL


def synthesize(
    plan: CellPlan,
    level: str = DEFAULT_LEVEL,
    attribute_column: str = "DEPTH",
    tolerance: float = DEFAULT_TOLERANCE,
    geometry_column: str = "geometry",
) -> str:
    """Returns one UNION ALL query for the plan, or ``""`` when it is empty."""

    geometry = (
        f"ST_MakeValid(ST_SimplifyPreserveTopology({geometry_column}, "
        f"{_format_number(tolerance)})) AS {GEOMETRY_COLUMN}"
    )
    fragments = [
        _fragment(item.layer_name, item.rule, geometry, level, attribute_column)
        for item in plan.layers
    ]
    return UNION.join(fragments)


def _fragment(
    layer_name: str,
    rule: ExtractionRule,
    geometry: str,
    level: str,
    attribute_column: str,
) -> str:
    layer_tag = f"{_literal(layer_name)} AS {LAYER_COLUMN}"
    source = f"FROM {_identifier(layer_name)}"

    if isinstance(rule, ConstantRule):
        return (
            f"SELECT {geometry}, {layer_tag}, "
            f"CAST({_format_number(rule.value)} AS REAL) AS {attribute_column} {source}"
        )

    field = _identifier(rule.field_name)
    where = f"WHERE {field} IS NOT NULL AND {field} != ''"

    if isinstance(rule, FieldCastRule):
        return (
            f"SELECT {geometry}, {layer_tag}, "
            f"CAST({field} AS REAL) AS {attribute_column} {source} {where}"
        )

    if isinstance(rule, FieldFilterRule):
        return (
            f"SELECT {geometry}, {_literal(level)} AS {LEVEL_COLUMN}, {layer_tag}, "
            f"{field} {source} {where}"
        )

    raise TypeError(f"unsupported extraction rule: {rule!r}")


def _literal(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


def _identifier(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


def _format_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value)
