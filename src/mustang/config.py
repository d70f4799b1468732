"""Resolver configuration.

A ``ResolverConfig`` is an immutable value: the strategy bound to each
shape, the types excluded from iterable-section semantics, and the
default case sensitivity. Changing a binding returns a new config, so a
config handed to a resolver can never change under it.

Example:
    >>> from mustang import DEFAULT_CONFIG, Resolver, Shape
    >>> config = DEFAULT_CONFIG.without_strategy(Shape.DYNAMIC_OBJECT)
    >>> resolver = Resolver(config)

"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from mustang._types import Shape, Strategy
from mustang.strategies import DEFAULT_STRATEGIES

# Iterable, but rendered once rather than per item in sections
DEFAULT_SECTION_BLACKLIST: tuple[type, ...] = (Mapping, str)


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Configuration for accessor resolution.

    Attributes:
        strategies: Strategy bound to each shape. Shapes without a binding
            are skipped during resolution.
        section_blacklist: Types never iterated as sections even though
            they are iterable.
        ignore_case: Default for ``Resolver.resolve(ignore_case=None)``.
    """

    strategies: Mapping[Shape, Strategy] = field(default_factory=lambda: DEFAULT_STRATEGIES)
    section_blacklist: tuple[type, ...] = DEFAULT_SECTION_BLACKLIST
    ignore_case: bool = False

    def __post_init__(self) -> None:
        # Freeze whatever mapping the caller passed in
        if not isinstance(self.strategies, MappingProxyType):
            object.__setattr__(self, "strategies", MappingProxyType(dict(self.strategies)))

    def strategy_for(self, shape: Shape) -> Strategy | None:
        """The strategy bound to ``shape``, or None."""
        return self.strategies.get(shape)

    def with_strategy(self, shape: Shape, strategy: Strategy) -> ResolverConfig:
        """Return a copy with ``shape`` bound to ``strategy``."""
        new = dict(self.strategies)
        new[shape] = strategy
        return replace(self, strategies=MappingProxyType(new))

    def without_strategy(self, shape: Shape) -> ResolverConfig:
        """Return a copy with no strategy bound to ``shape``."""
        new = dict(self.strategies)
        new.pop(shape, None)
        return replace(self, strategies=MappingProxyType(new))

    def with_section_blacklist(self, types: Iterable[type]) -> ResolverConfig:
        """Return a copy excluding ``types`` from section iteration."""
        return replace(self, section_blacklist=tuple(types))


DEFAULT_CONFIG = ResolverConfig()
