"""YAML based registry loading."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from s57_extract.common import (
    ConstantRule,
    ExtractionRule,
    FieldCastRule,
    FieldFilterRule,
    RegistryError,
)

from .models import LayerRegistry

logger = logging.getLogger(__name__)

_KIND_ALIASES = {
    "constant": "constant",
    "const": "constant",
    "cast": "cast",
    "field_cast": "cast",
    "filter": "filter",
    "field_filter": "filter",
}


def load_layer_registry(config_path: Path) -> LayerRegistry:
    """Loads a registry YAML file. Raises RegistryError on any problem."""
    data = _safe_load_yaml(config_path)
    if data is None:
        raise RegistryError(f"registry file is missing or not a mapping: {config_path}")

    registry_raw = data.get("registry")
    if not isinstance(registry_raw, dict):
        raise RegistryError(f"'registry' section not found: {config_path}")

    attribute_column = str(registry_raw.get("attribute_column", "DEPTH"))
    layers_raw = registry_raw.get("layers") or []
    if not isinstance(layers_raw, list) or not layers_raw:
        raise RegistryError(f"'registry.layers' must be a non-empty list: {config_path}")

    entries = [_parse_layer(item, config_path) for item in layers_raw]
    registry = LayerRegistry(entries, attribute_column=attribute_column)
    logger.info("registry loaded: path=%s, layers=%d", config_path, len(registry))
    return registry


def _parse_layer(item: Any, config_path: Path) -> tuple[str, ExtractionRule]:
    if not isinstance(item, dict):
        raise RegistryError(f"layer entry must be a mapping: {item!r} ({config_path})")

    name = str(item.get("name", "")).strip()
    kind = _KIND_ALIASES.get(str(item.get("kind", "")).strip().lower())
    if not name:
        raise RegistryError(f"layer entry without name: {item!r} ({config_path})")
    if kind is None:
        raise RegistryError(f"unknown rule kind for layer {name}: {item.get('kind')!r}")

    if kind == "constant":
        if "value" not in item:
            raise RegistryError(f"constant rule for layer {name} needs 'value'")
        try:
            value = float(item["value"])
        except (TypeError, ValueError) as exc:
            raise RegistryError(f"constant value for layer {name} is not numeric") from exc
        return name, ConstantRule(value=value)

    field_name = str(item.get("field", "")).strip()
    if not field_name:
        raise RegistryError(f"{kind} rule for layer {name} needs 'field'")
    if kind == "cast":
        return name, FieldCastRule(field_name=field_name)
    return name, FieldFilterRule(field_name=field_name)


def _safe_load_yaml(path: Path) -> dict[str, Any] | None:
    """Returns the top-level mapping or None when the file is unusable."""
    try:
        with open(path, encoding="utf-8") as f:
            result = yaml.safe_load(f)
        if isinstance(result, dict):
            return result
        return None
    except (OSError, yaml.YAMLError):
        logger.warning("YAML loading failed: %s", path)
        return None
