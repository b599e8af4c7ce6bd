"""
Polymorphic construction primitives.

Two ways of choosing a concrete variant for a raw document:

- ProbeChain: ordered (predicate, constructor) pairs over the document's
  shape. The first predicate that holds wins; the chain always ends in a
  fallback constructor, so resolution never fails on shape alone.
- TagRegistry: a discriminator field names the variant explicitly. An absent
  or unregistered tag raises UnknownVariant; there is no default variant.
"""

import logging
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, Tuple, TypeVar

from cube_entity.errors import MalformedDocument, UnknownVariant

logger = logging.getLogger(__name__)

T = TypeVar("T")

Predicate = Callable[[Mapping[str, Any]], bool]
Constructor = Callable[[Mapping[str, Any]], T]


class ProbeChain(Generic[T]):
    """Priority-ordered structural probes with a mandatory fallback."""

    def __init__(self, family: str, fallback: Constructor):
        self.family = family
        self._probes: List[Tuple[str, Predicate, Constructor]] = []
        self._fallback = fallback

    def add(self, name: str, predicate: Predicate, constructor: Constructor) -> "ProbeChain[T]":
        """Append a probe. Probes added earlier take precedence."""
        self._probes.append((name, predicate, constructor))
        return self

    @property
    def order(self) -> List[str]:
        return [name for name, _, _ in self._probes]

    def resolve(self, data: Any) -> T:
        if not isinstance(data, Mapping):
            raise MalformedDocument("$", f"expected an object, got {type(data).__name__}", self.family)
        for name, predicate, constructor in self._probes:
            if predicate(data):
                logger.debug("%s resolved by probe '%s'", self.family, name)
                return constructor(data)
        logger.debug("%s resolved by fallback", self.family)
        return self._fallback(data)


class TagRegistry(Generic[T]):
    """Maps a discriminator value to the constructor of its variant."""

    def __init__(self, family: str, tag_field: str):
        self.family = family
        self.tag_field = tag_field
        self._constructors: Dict[str, Constructor] = {}

    def register(self, tag: str, constructor: Constructor) -> None:
        if tag in self._constructors:
            raise ValueError(f"{self.family} tag {tag!r} is already registered")
        self._constructors[tag] = constructor

    def variant(self, tag: str) -> Callable[[Any], Any]:
        """Class decorator registering ``cls.from_json`` under ``tag``."""

        def decorator(cls):
            self.register(tag, cls.from_json)
            return cls

        return decorator

    def tags(self) -> List[str]:
        return sorted(self._constructors)

    def get(self, tag: str) -> Optional[Constructor]:
        return self._constructors.get(tag)

    def resolve(self, data: Any) -> T:
        if not isinstance(data, Mapping):
            raise MalformedDocument("$", f"expected an object, got {type(data).__name__}", self.family)
        tag = data.get(self.tag_field)
        constructor = self._constructors.get(tag) if isinstance(tag, str) else None
        if constructor is None:
            logger.warning("%s: no variant registered for %s=%r", self.family, self.tag_field, tag)
            raise UnknownVariant(self.family, None if tag is None else str(tag))
        return constructor(data)
