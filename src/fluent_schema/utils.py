import abc
import re
import typing
from functools import singledispatch as register

import frozendict

Pattern = type(re.compile(""))

SCALARS = (str, int, float, bool, type(None))


class Ø(abc.ABCMeta):
    def __bool__(self):
        return False


class EMPTY(metaclass=Ø):
    """a false sentinel"""

    pass


def lowercase(s):
    """return a lower string"""
    if s:
        return s[0].lower() + s[1:]
    return ""


def normalize_json_key(s):
    """convert a class name to a proper json key based on conventions

    * one trailing `_` refers to a `$` key
    * otherwise the name is lowercased in camel case

    >>> normalize_json_key("MinLength")
    'minLength'
    >>> normalize_json_key("Comment_")
    '$comment'
    """
    if s.endswith("_"):
        return "$" + lowercase(s[:-1])
    return lowercase(s)


@register
def freeze(object) -> typing.Hashable:
    """freeze a nested mutable object into something hashable."""
    return object


@freeze.register(list)
@freeze.register(tuple)
def freeze_iter(object):
    return tuple(map(freeze, object))


@freeze.register(dict)
def freeze_dict(object):
    return frozendict.frozendict({k: freeze(v) for k, v in object.items()})


@register
def unfreeze(object):
    """unfreeze an immutable object into plain json containers."""
    return object


@unfreeze.register(list)
@unfreeze.register(tuple)
def unfreeze_iter(object):
    return list(map(unfreeze, object))


@unfreeze.register(dict)
@unfreeze.register(frozendict.frozendict)
def unfreeze_dict(object):
    return {k: unfreeze(v) for k, v in object.items()}


def is_json(object):
    """test that an object is made only of json values"""
    if isinstance(object, SCALARS):
        return True
    if isinstance(object, (list, tuple)):
        return all(map(is_json, object))
    if isinstance(object, (dict, frozendict.frozendict)):
        return all(isinstance(k, str) and is_json(v) for k, v in object.items())
    return False


def is_number(object):
    return isinstance(object, (int, float)) and not isinstance(object, bool)
