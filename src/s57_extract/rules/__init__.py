"""Layer registry module."""

from .loader import load_layer_registry
from .models import LayerRegistry
from .presets import (
    DEFAULT_NAME_FIELD,
    DEFAULT_NAME_LAYERS,
    DEPTH_FIELDS,
    LAND_DEPTH,
    LAND_LAYER,
    build_depth_registry,
    build_name_registry,
)

__all__ = [
    "DEFAULT_NAME_FIELD",
    "DEFAULT_NAME_LAYERS",
    "DEPTH_FIELDS",
    "LAND_DEPTH",
    "LAND_LAYER",
    "LayerRegistry",
    "build_depth_registry",
    "build_name_registry",
    "load_layer_registry",
]
