"""the fluent builder.

a ``FluentSchema`` is an immutable value: every call returns a new builder that
shares the unchanged parts of the schema tree with the one it was called on, so
chains observe all prior calls and earlier builders can be reused freely.

>>> FluentSchema().prop("email").asString().format("email").required().valueOf()
{'$schema': 'http://json-schema.org/draft-07/schema#', 'type': 'object', 'required': ['email'], 'properties': {'email': {'type': 'string', '$id': '#properties/email', 'format': 'email'}}}
"""

import dataclasses
import logging
import typing

import frozendict

from . import exceptions, keywords, mixins, nodes, paths, utils
from .nodes import SchemaNode
from .registry import RefRegistry
from .serializer import Serializer
from .types import DRAFT_07, TYPES
from .utils import EMPTY

__all__ = ("FluentSchema", "Options")

logger = logging.getLogger(__name__)

# keywords that are set through dedicated methods rather than attribute dispatch
HIDDEN = {"$comment", "not", "if", "then", "else"}


@dataclasses.dataclass(frozen=True)
class Options:
    """settings of a document. only the options of the builder that is
    serialized apply; the options of nested builders are ignored."""

    schema_uri: str = DRAFT_07
    generate_ids: bool = True


class FluentSchema(mixins.SchemaOps):
    def __init__(self, options: typing.Optional[Options] = None, **kwargs):
        if options is None:
            options = Options(**kwargs)
        elif kwargs:
            options = dataclasses.replace(options, **kwargs)
        self.options = options
        self._root = SchemaNode(implied=TYPES.OBJECT.value)
        self._registry = RefRegistry()
        self._cursor = ()

    def fresh(self):
        """a new empty builder with the same options"""
        return type(self)(self.options)

    def _evolve(self, root=EMPTY, registry=EMPTY, cursor=EMPTY):
        new = object.__new__(type(self))
        new.options = self.options
        new._root = self._root if root is EMPTY else root
        new._registry = self._registry if registry is EMPTY else registry
        new._cursor = self._cursor if cursor is EMPTY else cursor
        return new

    @property
    def cursor(self) -> paths.Chain:
        return self._cursor

    @property
    def current(self) -> SchemaNode:
        """the node at the cursor"""
        return nodes.get_node(self._root, self._cursor)

    def _update(self, node, **kwargs):
        return self._evolve(root=nodes.set_node(self._root, self._cursor, node), **kwargs)

    # cursor and structure

    def prop(self, name: str, subschema: "FluentSchema" = None) -> "FluentSchema":
        """open the property name on the object owning the cursor and move the
        cursor to it. a subschema is attached as the property's node and its
        definitions join the ones of this builder."""
        exceptions.check(
            isinstance(name, str) and name, "prop", name, "a non-empty property name"
        )
        chain = paths.parent(self._cursor)
        owner = nodes.get_node(self._root, chain)
        if owner.ref is not None or not owner.accepts(TYPES.OBJECT.value):
            raise exceptions.InvalidCursorError(
                f"can not add property {name!r} to a {owner.kind} node", chain
            )

        registry = self._registry
        if subschema is None:
            node = SchemaNode()
        else:
            exceptions.check(
                isinstance(subschema, FluentSchema), "prop", subschema, "a FluentSchema"
            )
            node = subschema._root
            registry = registry.merge(subschema._registry)

        root = nodes.set_node(self._root, chain, owner.with_property(name, node))
        return self._evolve(
            root=root, registry=registry, cursor=paths.child(chain, name)
        )

    def required(self) -> "FluentSchema":
        """mark the property at the cursor as required on its parent"""
        if not self._cursor:
            raise exceptions.InvalidCursorError(
                "required() needs a property at the cursor"
            )
        chain = paths.parent(self._cursor)
        owner = nodes.get_node(self._root, chain)
        owner = owner.with_required(paths.name(self._cursor))
        return self._evolve(root=nodes.set_node(self._root, chain, owner))

    def definition(self, name: str, schema: "FluentSchema") -> "FluentSchema":
        """register schema under `#definitions/<name>`; the cursor stays put"""
        exceptions.check(
            isinstance(name, str) and name,
            "definition",
            name,
            "a non-empty definition name",
        )
        exceptions.check(
            isinstance(schema, FluentSchema), "definition", schema, "a FluentSchema"
        )
        registry = self._registry.define(name, schema._root).merge(schema._registry)
        return self._evolve(registry=registry)

    def ref(self, path: str) -> "FluentSchema":
        """turn the node at the cursor into a `$ref` to path. the path is not
        resolved, forward and dangling references are both accepted."""
        exceptions.check(isinstance(path, str) and path, "$ref", path, "a path")
        return self._update(
            SchemaNode(ref=path), registry=self._registry.record(path)
        )

    def id(self, value: str) -> "FluentSchema":
        """set the `$id` of the document root"""
        if self._cursor:
            raise exceptions.InvalidCursorError(
                "$id can only be set on the root", self._cursor
            )
        exceptions.check(isinstance(value, str), "$id", value, "a string")
        return self._evolve(root=self._root.replace(id=value))

    # types

    def _narrow(self, type):
        return self._update(self.current.narrow(type.value, self._cursor))

    def asString(self):
        return self._narrow(TYPES.STRING)

    def asNumber(self):
        return self._narrow(TYPES.NUMBER)

    def asInteger(self):
        return self._narrow(TYPES.INTEGER)

    def asBoolean(self):
        return self._narrow(TYPES.BOOLEAN)

    def asArray(self):
        return self._narrow(TYPES.ARRAY)

    def asObject(self):
        return self._narrow(TYPES.OBJECT)

    def asNull(self):
        return self._narrow(TYPES.NULL)

    # keywords

    def _keyword(self, cls, *args):
        if len(args) > 1:
            raise TypeError(f"{cls.key()}() takes one value, got {len(args)}")
        value = args[0] if args else cls.default
        if value is EMPTY:
            raise TypeError(f"{cls.key()}() missing a value")

        node = self.current
        if node.ref is not None:
            raise exceptions.InvalidCursorError(
                f"{cls.key()} can not be set on a $ref node", self._cursor
            )
        if not node.accepts(cls.family):
            raise exceptions.InvalidCursorError(
                f"{cls.key()} can not be set on a {node.type} node", self._cursor
            )
        node = cls.apply(node, cls.check(value))
        registry = self._registry
        for builder in nested(value):
            registry = registry.merge(builder._registry)
        return self._update(node, registry=registry)

    def __getattr__(self, name):
        if name[:1].islower() and name in keywords.KEYWORDS and name not in HIDDEN:
            cls = keywords.KEYWORDS[name]

            def caller(*args):
                return self._keyword(cls, *args)

            caller.__name__ = name
            caller.__doc__ = f"set {name} on the node at the cursor"
            return caller
        raise AttributeError(
            f"{type(self).__name__!r} object has no attribute {name!r}"
        )

    def __dir__(self):
        return list(super().__dir__()) + [
            k for k in keywords.KEYWORDS if k[:1].islower() and k not in HIDDEN
        ]

    def comment(self, text: str) -> "FluentSchema":
        return self._keyword(keywords.Comment_, text)

    # combinators

    def not_(self, schema: "FluentSchema") -> "FluentSchema":
        return self._keyword(keywords.Not, schema)

    def ifThen(self, condition: "FluentSchema", then: "FluentSchema"):
        return self._keyword(keywords.If, condition)._keyword(keywords.Then, then)

    def ifThenElse(
        self, condition: "FluentSchema", then: "FluentSchema", else_: "FluentSchema"
    ):
        return self.ifThen(condition, then)._keyword(keywords.Else, else_)

    # terminal

    def valueOf(self) -> dict:
        """serialize the document. pure: the builder is not changed."""
        dangling = self.dangling()
        if dangling:
            logger.debug(
                "serializing with dangling $ref targets: %s", ", ".join(dangling)
            )
        return Serializer(self.options).document(
            self._root, self._registry.definitions
        )

    value_of = valueOf

    def dangling(self) -> typing.Tuple[str, ...]:
        """local `#definitions/...` targets referenced but never defined"""
        return self._registry.dangling()

    def print(self):
        import rich

        rich.print_json(data=self.valueOf())

    def __eq__(self, object):
        if isinstance(object, FluentSchema):
            return self.valueOf() == object.valueOf()
        return NotImplemented

    def __hash__(self):
        return hash(utils.freeze(self.valueOf()))

    def __repr__(self):
        return f"{type(self).__name__}({self.valueOf()!r})"


@nodes.to_node.register
def to_node_builder(object: FluentSchema, key="schema"):
    return object._root


@utils.register
def nested(object):
    """the builders embedded in a keyword value"""
    return ()


@nested.register
def nested_builder(object: FluentSchema):
    return (object,)


@nested.register(tuple)
@nested.register(list)
def nested_iter(object):
    return tuple(x for value in object for x in nested(value))


@nested.register(dict)
@nested.register(frozendict.frozendict)
def nested_dict(object):
    return nested(tuple(object.values()))
