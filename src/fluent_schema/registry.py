import dataclasses
import logging
import typing

import frozendict

from . import exceptions, paths

logger = logging.getLogger(__name__)

LOCAL = "#" + paths.DEFINITIONS + "/"


@dataclasses.dataclass(frozen=True)
class RefRegistry:
    """the definitions of a document and the `$ref` targets recorded while
    chaining. targets are never resolved when they are recorded or serialized;
    a dangling target is left for the validator consuming the document."""

    definitions: frozendict.frozendict = dataclasses.field(
        default_factory=frozendict.frozendict
    )
    refs: typing.Tuple[str, ...] = ()

    def define(self, name, node):
        if name in self.definitions:
            raise exceptions.DuplicateDefinitionError(name)
        logger.debug("registering definition %s", name)
        return dataclasses.replace(self, definitions=self.definitions.set(name, node))

    def record(self, path):
        logger.debug("recording $ref %s", path)
        return dataclasses.replace(self, refs=self.refs + (path,))

    def merge(self, other):
        """take over the definitions and targets of a nested registry. a name
        registered on both sides must hold the same node."""
        registry = self
        for name, node in other.definitions.items():
            if registry.definitions.get(name) != node:
                registry = registry.define(name, node)
        return dataclasses.replace(registry, refs=registry.refs + other.refs)

    def resolve(self, path):
        """return the definition a local `#definitions/<name>` path points to"""
        if path.startswith(LOCAL):
            return self.definitions.get(path[len(LOCAL) :])

    def dangling(self):
        """the recorded local targets without a definition, in recorded order"""
        return tuple(
            dict.fromkeys(
                path
                for path in self.refs
                if path.startswith(LOCAL) and self.resolve(path) is None
            )
        )

    def __contains__(self, name):
        return name in self.definitions
