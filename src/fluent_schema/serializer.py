"""emit the plain json document of a schema tree"""

import logging

import frozendict

from . import paths, utils
from .nodes import SchemaNode

logger = logging.getLogger(__name__)


class Serializer:
    """walk a schema tree and stamp structural `$id`s on the way down.

    keys of every emitted node follow the priority, then keywords in the order
    they were set, then the trailing keys.
    """

    priority = ["$schema", "definitions", "$ref", "type", "$id"]
    trailing = ["required", "properties"]

    def __init__(self, options):
        self.options = options

    def document(
        self, root: SchemaNode, definitions=frozendict.frozendict()
    ) -> dict:
        body = self.visit(root, ())
        if definitions:
            body["definitions"] = {
                name: self.visit(value, paths.child((), name, paths.DEFINITIONS))
                for name, value in definitions.items()
            }
        body["$schema"] = self.options.schema_uri
        logger.debug(
            "serialized a document with %d properties and %d definitions",
            len(root.properties),
            len(definitions),
        )
        return self.order(body)

    def order(self, body):
        keys = [k for k in body if k not in self.priority + self.trailing]
        order = self.priority + keys + self.trailing
        return {k: body[k] for k in sorted(body, key=order.index)}

    def identify(self, node, chain):
        if not chain:
            return node.id
        if self.options.generate_ids:
            return paths.resolve_id(chain)

    def visit(self, node, chain: paths.Chain):
        if isinstance(node, bool):
            return node

        body = {}
        if node.ref is not None:
            body["$ref"] = node.ref
            return self.order(body)

        if node.effective_type:
            body["type"] = node.effective_type

        id = self.identify(node, chain)
        if id is not None:
            body["$id"] = id

        for key, value in node.keywords.items():
            body[key] = emit(value, self)

        if node.required:
            body["required"] = list(node.required)

        if node.properties:
            body["properties"] = {
                name: self.visit(value, paths.child(chain, name))
                for name, value in node.properties.items()
            }
        return self.order(body)


@utils.register
def emit(object, serializer):
    """emit a keyword value. subschemas inside keywords begin a fresh chain."""
    return utils.unfreeze(object)


@emit.register
def emit_node(object: SchemaNode, serializer):
    return serializer.visit(object, ())


@emit.register(tuple)
@emit.register(list)
def emit_iter(object, serializer):
    return [emit(x, serializer) for x in object]


@emit.register(dict)
@emit.register(frozendict.frozendict)
def emit_dict(object, serializer):
    return {k: emit(v, serializer) for k, v in object.items()}
