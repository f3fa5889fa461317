"""draft-07 keywords as classes.

each keyword class is named after its json key and knows the type family it
constrains, how to check an argument and how to apply it to a node. the builder
dispatches lowercased attribute access to these classes, so ``minLength(3)``
resolves to ``MinLength``.
"""

import collections.abc

import frozendict

from . import exceptions, nodes, utils
from .types import FORMATS, TYPES
from .utils import EMPTY

__all__ = ("KEYWORDS", "Keyword")

KEYWORDS = {}


class Keyword:
    family = None
    default = EMPTY

    def __init_subclass__(cls, family=None, **kwargs):
        super().__init_subclass__(**kwargs)
        if family is not None:
            cls.family = TYPES(family).value
        KEYWORDS[cls.key()] = cls

    @classmethod
    def key(cls):
        return utils.normalize_json_key(cls.__name__)

    @classmethod
    def check(cls, value):
        return utils.freeze(value)

    @classmethod
    def apply(cls, node, value):
        return node.with_keyword(cls.key(), value)

    @classmethod
    def expects(cls, condition, value, expected):
        return exceptions.check(condition, cls.key(), value, expected)


class Text:
    @classmethod
    def check(cls, value):
        return cls.expects(isinstance(value, str), value, "a string")


class Json:
    @classmethod
    def check(cls, value):
        cls.expects(utils.is_json(value), value, "a json value")
        return utils.freeze(value)


class Flag:
    default = True

    @classmethod
    def check(cls, value):
        return cls.expects(isinstance(value, bool), value, "a boolean")


class Count:
    @classmethod
    def check(cls, value):
        return cls.expects(
            isinstance(value, int) and not isinstance(value, bool) and value >= 0,
            value,
            "a non-negative integer",
        )


class Number:
    @classmethod
    def check(cls, value):
        return cls.expects(utils.is_number(value), value, "a number")


class Subschema:
    @classmethod
    def check(cls, value):
        return nodes.to_node(value, cls.key())


class Subschemas:
    @classmethod
    def check(cls, value):
        cls.expects(
            isinstance(value, (list, tuple)) and value, value, "a non-empty list"
        )
        return tuple(nodes.to_node(x, cls.key()) for x in value)


class SchemaMap:
    @classmethod
    def check(cls, value):
        cls.expects(
            isinstance(value, collections.abc.Mapping)
            and all(isinstance(k, str) for k in value),
            value,
            "a mapping of strings to schemas",
        )
        return frozendict.frozendict(
            {k: nodes.to_node(v, cls.key()) for k, v in value.items()}
        )


# metadata, valid on any node


class Title(Text, Keyword):
    pass


class Description(Text, Keyword):
    pass


class Comment_(Text, Keyword):
    pass


class Default(Json, Keyword):
    pass


class Examples(Json, Keyword):
    @classmethod
    def check(cls, value):
        cls.expects(isinstance(value, (list, tuple)), value, "a list")
        return super().check(value)


class ReadOnly(Flag, Keyword):
    pass


class WriteOnly(Flag, Keyword):
    pass


# variants


class Enum(Keyword):
    @classmethod
    def check(cls, value):
        cls.expects(
            isinstance(value, (list, tuple))
            and value
            and all(isinstance(x, utils.SCALARS) for x in value),
            value,
            "a non-empty list of json scalars",
        )
        return tuple(value)


class Const(Json, Keyword):
    @classmethod
    def apply(cls, node, value):
        node = node.without_keywords(Enum.key()).replace(type=None)
        return super().apply(node, value)


class AllOf(Subschemas, Keyword):
    pass


class AnyOf(Subschemas, Keyword):
    pass


class OneOf(Subschemas, Keyword):
    pass


class Not(Subschema, Keyword):
    pass


class If(Subschema, Keyword):
    pass


class Then(Subschema, Keyword):
    pass


class Else(Subschema, Keyword):
    pass


# strings


class MinLength(Count, Keyword, family=TYPES.STRING):
    pass


class MaxLength(Count, Keyword, family=TYPES.STRING):
    pass


class Pattern(Keyword, family=TYPES.STRING):
    @classmethod
    def check(cls, value):
        if isinstance(value, utils.Pattern):
            value = value.pattern
        return cls.expects(isinstance(value, str), value, "a regular expression")


class Format(Keyword, family=TYPES.STRING):
    @classmethod
    def check(cls, value):
        format = FORMATS.get(value)
        cls.expects(format, value, f"one of {', '.join(map(str, FORMATS))}")
        return format.value


class ContentEncoding(Text, Keyword, family=TYPES.STRING):
    pass


class ContentMediaType(Text, Keyword, family=TYPES.STRING):
    pass


# numbers


class Minimum(Number, Keyword, family=TYPES.NUMBER):
    pass


class Maximum(Number, Keyword, family=TYPES.NUMBER):
    pass


class ExclusiveMinimum(Number, Keyword, family=TYPES.NUMBER):
    pass


class ExclusiveMaximum(Number, Keyword, family=TYPES.NUMBER):
    pass


class MultipleOf(Number, Keyword, family=TYPES.NUMBER):
    @classmethod
    def check(cls, value):
        return cls.expects(
            utils.is_number(value) and value > 0, value, "a number greater than 0"
        )


# arrays


class Items(Keyword, family=TYPES.ARRAY):
    @classmethod
    def check(cls, value):
        if isinstance(value, (list, tuple)):
            return Subschemas.check.__func__(cls, value)
        return nodes.to_node(value, cls.key())


class AdditionalItems(Subschema, Keyword, family=TYPES.ARRAY):
    pass


class Contains(Subschema, Keyword, family=TYPES.ARRAY):
    pass


class MinItems(Count, Keyword, family=TYPES.ARRAY):
    pass


class MaxItems(Count, Keyword, family=TYPES.ARRAY):
    pass


class UniqueItems(Flag, Keyword, family=TYPES.ARRAY):
    pass


# objects


class MinProperties(Count, Keyword, family=TYPES.OBJECT):
    pass


class MaxProperties(Count, Keyword, family=TYPES.OBJECT):
    pass


class PatternProperties(SchemaMap, Keyword, family=TYPES.OBJECT):
    pass


class AdditionalProperties(Subschema, Keyword, family=TYPES.OBJECT):
    pass


class PropertyNames(Subschema, Keyword, family=TYPES.OBJECT):
    pass


class Dependencies(Keyword, family=TYPES.OBJECT):
    @classmethod
    def check(cls, value):
        cls.expects(
            isinstance(value, collections.abc.Mapping)
            and all(isinstance(k, str) for k in value),
            value,
            "a mapping of property names to schemas or lists of names",
        )
        dependencies = {}
        for k, v in value.items():
            if isinstance(v, (list, tuple)):
                cls.expects(
                    all(isinstance(x, str) for x in v), value, "lists of property names"
                )
                dependencies[k] = tuple(v)
            else:
                dependencies[k] = nodes.to_node(v, cls.key())
        return frozendict.frozendict(dependencies)
