"""errors raised while chaining a fluent schema.

every error is raised by the call that caused it. builders are immutable so the
builder receiving the failed call is left as it was.
"""

__all__ = (
    "FluentSchemaError",
    "InvalidCursorError",
    "TypeAlreadySetError",
    "InvalidKeywordValueError",
    "DuplicateDefinitionError",
)


class FluentSchemaError(Exception):
    pass


class InvalidCursorError(FluentSchemaError):
    """the node at the cursor can not accept the call"""

    def __init__(self, message, cursor=()):
        from .paths import resolve_id

        self.cursor = cursor
        super().__init__(f"{message} (at {resolve_id(cursor) or '#'})")


class TypeAlreadySetError(InvalidCursorError):
    """a node was narrowed twice to different types"""

    def __init__(self, current, requested, cursor=()):
        self.current, self.requested = current, requested
        super().__init__(
            f"type is already {current!r}, can not change it to {requested!r}", cursor
        )


class InvalidKeywordValueError(FluentSchemaError, ValueError):
    """a keyword received a value of the wrong shape"""

    def __init__(self, key, value, expected):
        self.key, self.value = key, value
        super().__init__(f"{key} expects {expected}, got {value!r}")


class DuplicateDefinitionError(FluentSchemaError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"definition {name!r} is already registered")


def check(condition, key, value, expected):
    """raise an InvalidKeywordValueError when condition is false"""
    if not condition:
        raise InvalidKeywordValueError(key, value, expected)
    return value
