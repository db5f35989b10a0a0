"""Built-in registries for the depth and object-name extractions."""

from __future__ import annotations

from typing import Sequence

from s57_extract.common import ConstantRule, FieldCastRule, FieldFilterRule, RegistryError

from .models import LayerRegistry

LAND_LAYER = "LNDARE"
LAND_DEPTH = -1

# SOUNDG.DEPTH only exists when the cell is opened with ADD_SOUNDG_DEPTH=ON.
DEPTH_FIELDS: dict[str, str] = {
    "DEPARE": "DRVAL1",
    "DEPCNT": "VALDCO",
    "DRGARE": "DRVAL1",
    "OBSTRN": "VALSOU",
    "SOUNDG": "DEPTH",
    "UWTROC": "VALSOU",
    "WRECKS": "VALSOU",
}

DEFAULT_NAME_LAYERS: tuple[str, ...] = ("LNDARE", "DEPARE", "SEAARE", "HRBFAC", "BRIDGE")
DEFAULT_NAME_FIELD = "NOBJNM"


def build_depth_registry(attribute_column: str = "DEPTH") -> LayerRegistry:
    """Land area first, then the depth layers in name order."""
    entries = [(LAND_LAYER, ConstantRule(value=LAND_DEPTH))]
    entries.extend(
        (layer_name, FieldCastRule(field_name=DEPTH_FIELDS[layer_name]))
        for layer_name in sorted(DEPTH_FIELDS)
    )
    return LayerRegistry(entries, attribute_column=attribute_column)


def build_name_registry(
    layers: Sequence[str] = DEFAULT_NAME_LAYERS,
    field_name: str = DEFAULT_NAME_FIELD,
) -> LayerRegistry:
    """Same text field filtered on every listed layer, in list order."""
    if not field_name or not field_name.strip():
        raise RegistryError("filter field must not be empty")

    ordered: list[str] = []
    for layer_name in layers:
        name = layer_name.strip()
        if name and name not in ordered:
            ordered.append(name)

    if not ordered:
        raise RegistryError("at least one layer is required")

    rule = FieldFilterRule(field_name=field_name.strip())
    return LayerRegistry(
        [(layer_name, rule) for layer_name in ordered],
        attribute_column=rule.field_name,
    )
