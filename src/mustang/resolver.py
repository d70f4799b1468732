"""Accessor resolution.

The resolver turns ``(type, key, ignore_case)`` into an extraction
procedure by walking the type's shapes in priority order:

1. ask the strategy bound to the shape
2. an accessor ends the walk
3. None (declined) moves to the next shape
4. a ``ResolutionError`` propagates immediately; no other shape is tried

``PLAIN_OBJECT`` is always the last shape and its default strategy never
declines, so with the default bindings every walk ends in step 2 or 4.

Thread-Safety:
A Resolver holds only its immutable config. ``resolve()`` keeps no state
between calls and is safe to call from many threads.

"""

from __future__ import annotations

import logging
from typing import Any

from mustang._types import Accessor
from mustang.config import DEFAULT_CONFIG, ResolverConfig
from mustang.descriptors import describe
from mustang.helpers import always_absent
from mustang.shapes import classify

logger = logging.getLogger(__name__)


class Resolver:
    """Resolve template keys to extraction procedures.

    Example:
            >>> resolver = Resolver()
            >>> get_title = resolver.resolve(Article, "title")
            >>> get_title(article)
            'Hello'
            >>> resolver.resolve(list, "3")([1, 2])
            Undefined

    Custom strategies:
            >>> config = DEFAULT_CONFIG.with_strategy(Shape.GENERIC_MAP, my_strategy)
            >>> resolver = Resolver(config)

    """

    __slots__ = ("_config",)

    def __init__(self, config: ResolverConfig | None = None) -> None:
        self._config = config or DEFAULT_CONFIG

    @property
    def config(self) -> ResolverConfig:
        return self._config

    def resolve(self, tp: Any, key: str, ignore_case: bool | None = None) -> Accessor:
        """Build the extraction procedure for ``key`` on ``tp``.

        Args:
            tp: Type of the values the procedure will read from
            key: Template key (variable name or list index)
            ignore_case: Match member names ignoring case. None uses the
                config default.

        Returns:
            Callable taking an instance and returning the value, or
            ``UNDEFINED`` when the key is absent on that instance.

        Raises:
            AmbiguousMemberError: Several members match ``key`` ignoring case
            UnsupportedCaseInsensitiveDynamicError: ``ignore_case`` on a
                dynamic type
        """
        if ignore_case is None:
            ignore_case = self._config.ignore_case
        desc = describe(tp)

        for shape in classify(tp):
            strategy = self._config.strategy_for(shape)
            if strategy is None:
                continue
            accessor = strategy(desc, key, ignore_case)
            if accessor is not None:
                logger.debug("Resolved %r on %s as %s", key, desc.name, shape.name)
                return accessor
            logger.debug("%s declined %r on %s", shape.name, key, desc.name)

        # Only reachable when the PLAIN_OBJECT binding was removed or replaced
        logger.debug("No strategy produced %r on %s; key is always absent", key, desc.name)
        return always_absent


_DEFAULT_RESOLVER = Resolver()


def resolve(tp: Any, key: str, ignore_case: bool = False) -> Accessor:
    """Resolve ``key`` on ``tp`` with the default configuration."""
    return _DEFAULT_RESOLVER.resolve(tp, key, ignore_case)
