"""the immutable schema tree.

every fluent call produces new nodes along the cursor path and shares the rest of
the tree with the builder it was called on.
"""

import dataclasses
import typing

import frozendict

from . import exceptions, paths, utils
from .types import COMPATIBLE, TYPES

__all__ = ("SchemaNode", "to_node", "get_node", "set_node")

# keywords that turn a node into a variant, in precedence order
VARIANTS = ("const", "enum", "allOf", "anyOf", "oneOf", "not", "if")


@dataclasses.dataclass(frozen=True)
class SchemaNode:
    type: typing.Optional[str] = None
    implied: typing.Optional[str] = None
    keywords: frozendict.frozendict = dataclasses.field(
        default_factory=frozendict.frozendict
    )
    properties: frozendict.frozendict = dataclasses.field(
        default_factory=frozendict.frozendict
    )
    required: typing.Tuple[str, ...] = ()
    ref: typing.Optional[str] = None
    id: typing.Optional[str] = None

    @property
    def kind(self):
        """the tag of the node: ref, a variant keyword, a json type or None"""
        if self.ref is not None:
            return "ref"
        for key in VARIANTS:
            if key in self.keywords:
                return key
        return self.type or self.effective_type

    @property
    def effective_type(self):
        """the type to emit: the explicit one, else the implied one when the node
        has properties or when no variant or keyword of another type family
        narrows it"""
        if self.type or self.ref is not None or not self.implied:
            return self.type
        if self.properties:
            return self.implied
        if any(key in self.keywords for key in VARIANTS):
            return None
        from .keywords import KEYWORDS

        for key in self.keywords:
            family = KEYWORDS[key].family
            if family and self.implied not in COMPATIBLE[family]:
                return None
        return self.implied

    def replace(self, **changes):
        return dataclasses.replace(self, **changes)

    def with_keyword(self, key, value):
        return self.replace(keywords=self.keywords.set(key, value))

    def without_keywords(self, *keys):
        return self.replace(
            keywords=frozendict.frozendict(
                {k: v for k, v in self.keywords.items() if k not in keys}
            )
        )

    def with_property(self, name, node):
        return self.replace(properties=self.properties.set(name, node))

    def with_required(self, name):
        if name in self.required:
            return self
        return self.replace(required=self.required + (name,))

    def accepts(self, family):
        """can a keyword of the family be set on this node"""
        if family is None or self.type is None:
            return True
        return self.type in COMPATIBLE[family]

    def narrow(self, type, cursor=()):
        """set the explicit type of the node"""
        if self.ref is not None:
            raise exceptions.InvalidCursorError("a $ref node can not be typed", cursor)
        if self.type == type:
            return self
        if self.type is not None:
            raise exceptions.TypeAlreadySetError(self.type, type, cursor)
        from .keywords import KEYWORDS

        for key in self.keywords:
            family = KEYWORDS[key].family
            if family and type not in COMPATIBLE[family]:
                raise exceptions.InvalidCursorError(
                    f"{key} can not be set on a {type} node", cursor
                )
        if self.properties and type != TYPES.OBJECT:
            raise exceptions.InvalidCursorError(
                f"a node with properties can not be a {type} node", cursor
            )
        return self.replace(type=type)


@utils.register
def to_node(object, key="schema"):
    """convert a subschema argument to a node"""
    raise exceptions.InvalidKeywordValueError(key, object, "a FluentSchema")


@to_node.register
def to_node_node(object: SchemaNode, key="schema"):
    return object


@to_node.register
def to_node_bool(object: bool, key="schema"):
    return object


def get_node(root: SchemaNode, chain: paths.Chain) -> SchemaNode:
    """walk the chain from root to the node it addresses"""
    node = root
    for segment, name in chain:
        node = getattr(node, segment)[name]
    return node


def set_node(root: SchemaNode, chain: paths.Chain, node: SchemaNode) -> SchemaNode:
    """return a new root with node placed at the end of chain. nodes that are not
    on the chain are shared with the old root."""
    if not chain:
        return node
    (segment, name), rest = chain[0], chain[1:]
    children = getattr(root, segment)
    children = children.set(name, set_node(children[name], rest, node))
    return root.replace(**{segment: children})
