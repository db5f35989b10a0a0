"""Layer registry model."""

from __future__ import annotations

from typing import Iterable, Iterator

from s57_extract.common import ExtractionRule, RegistryError


class LayerRegistry:
    """Ordered, read-only mapping of layer name to extraction rule.

    Iteration follows insertion order, which is also the order of the
    fragments in a synthesized query and therefore the output row order.
    All rules must project the same columns so that their fragments can be
    combined with ``UNION ALL``.
    """

    def __init__(
        self,
        entries: Iterable[tuple[str, ExtractionRule]],
        attribute_column: str = "DEPTH",
    ) -> None:
        if not attribute_column:
            raise RegistryError("attribute column must not be empty")

        rules: dict[str, ExtractionRule] = {}
        for layer_name, rule in entries:
            if not layer_name:
                raise RegistryError("layer name must not be empty")
            if layer_name in rules:
                raise RegistryError(f"duplicate layer in registry: {layer_name}")
            rules[layer_name] = rule

        shapes = {rule.output_columns(attribute_column) for rule in rules.values()}
        if len(shapes) > 1:
            raise RegistryError(
                "registry rules project different columns: "
                + "; ".join(", ".join(shape) for shape in sorted(shapes))
            )

        self._rules = rules
        self._attribute_column = attribute_column

    @property
    def attribute_column(self) -> str:
        return self._attribute_column

    @property
    def layer_names(self) -> tuple[str, ...]:
        return tuple(self._rules)

    @property
    def output_columns(self) -> tuple[str, ...]:
        """Column tuple every fragment of this registry produces."""
        for rule in self._rules.values():
            return rule.output_columns(self._attribute_column)
        return ()

    def rule_for(self, layer_name: str) -> ExtractionRule | None:
        return self._rules.get(layer_name)

    def items(self) -> Iterator[tuple[str, ExtractionRule]]:
        return iter(self._rules.items())

    def __contains__(self, layer_name: object) -> bool:
        return layer_name in self._rules

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"LayerRegistry({list(self._rules.items())!r}, attribute_column={self._attribute_column!r})"
