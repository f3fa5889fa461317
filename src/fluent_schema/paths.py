"""structural `$id`s for properties and definitions.

a node's ancestry is a chain of ``(segment, name)`` pairs from the document root,
where segment is ``properties`` or ``definitions``. the chain doubles as the
builder's cursor.
"""

import typing

import jsonpointer

PROPERTIES, DEFINITIONS = "properties", "definitions"

Chain = typing.Tuple[typing.Tuple[str, str], ...]


def resolve_id(chain: Chain) -> typing.Optional[str]:
    """compute the `$id` fragment of the node at the end of chain

    >>> resolve_id(())
    >>> resolve_id((("properties", "email"),))
    '#properties/email'
    >>> resolve_id((("definitions", "address"), ("properties", "line1")))
    '#definitions/address/properties/line1'
    >>> resolve_id((("properties", "a/b"),))
    '#properties/a~1b'
    """
    if not chain:
        return None
    parts = [part for segment in chain for part in segment]
    return "#" + jsonpointer.JsonPointer.from_parts(parts).path[1:]


def child(chain: Chain, name: str, segment: str = PROPERTIES) -> Chain:
    return chain + ((segment, name),)


def parent(chain: Chain) -> Chain:
    return chain[:-1]


def name(chain: Chain) -> typing.Optional[str]:
    if chain:
        return chain[-1][1]
    return None
