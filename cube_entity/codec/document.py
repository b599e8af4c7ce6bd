"""
Document Codec — loads and dumps entity documents in bulk.

Parsing targets are either model classes (anything with ``from_json``) or
resolver callables such as ``resolve_contact``. Structural failures surface
as EntityError; a batch either stops at the first one or, when configured,
logs and skips the bad record.
"""

import json
import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from cube_entity.errors import EntityError, MalformedDocument
from cube_entity.models.base import Entity, JSONModel, Shape
from cube_entity.models.config import CodecConfig

logger = logging.getLogger(__name__)

Target = Union[type, Callable[[Any], JSONModel]]


class DocumentCodec:
    """Config-driven front door for parsing and serializing entities."""

    def __init__(self, config: Optional[CodecConfig] = None):
        self.config = config or CodecConfig()

    # --- Parsing ---

    def load(self, target: Target, data: Any) -> JSONModel:
        """Parse one document with a model class or a resolver."""
        data = self._with_default_domain(target, data)
        if isinstance(target, type):
            return target.from_json(data)
        return target(data)

    def load_many(self, target: Target, items: Iterable[Any]) -> List[JSONModel]:
        """
        Parse a batch. With ``skip_malformed`` a failing record is logged
        and dropped; otherwise the first failure propagates.
        """
        results: List[JSONModel] = []
        for index, item in enumerate(items):
            try:
                results.append(self.load(target, item))
            except EntityError as exc:
                if not self.config.skip_malformed:
                    raise
                logger.warning("Skipping malformed record #%d: %s", index, exc)
        return results

    def loads(self, target: Target, text: Union[str, bytes]) -> JSONModel:
        """Parse a JSON text document."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise MalformedDocument("$", f"invalid JSON: {exc.msg}") from exc
        except UnicodeDecodeError as exc:
            raise MalformedDocument("$", f"invalid text encoding: {exc.reason}") from exc
        return self.load(target, data)

    # --- Serialization ---

    def dump(self, entity: JSONModel, shape: Optional[Shape] = None) -> Dict[str, Any]:
        return entity.dump(shape or self.config.shape)

    def dump_many(self, entities: Iterable[JSONModel], shape: Optional[Shape] = None) -> List[Dict[str, Any]]:
        return [self.dump(entity, shape) for entity in entities]

    def dumps(self, entity: JSONModel, shape: Optional[Shape] = None) -> str:
        return json.dumps(self.dump(entity, shape), ensure_ascii=False, indent=self.config.indent)

    # --- Internals ---

    def _with_default_domain(self, target: Target, data: Any) -> Any:
        """
        Fill in ``domain`` for entity documents that lack one. Resolvers are
        assumed to build entities; plain value records are left untouched.
        """
        if not self.config.default_domain or not isinstance(data, dict) or "domain" in data:
            return data
        if isinstance(target, type) and not issubclass(target, Entity):
            return data
        return {**data, "domain": self.config.default_domain}
