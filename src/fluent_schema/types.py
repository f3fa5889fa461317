"""the closed vocabularies of draft-07: json types and string formats"""

import enum

__all__ = ("DRAFT_07", "TYPES", "FORMATS")

DRAFT_07 = "http://json-schema.org/draft-07/schema#"


class Vocabulary(str, enum.Enum):
    @classmethod
    def get(cls, object):
        """return the member for a member or its string value, else None

        >>> FORMATS.get("date-time")
        <FORMATS.DATE_TIME: 'date-time'>
        """
        if isinstance(object, cls):
            return object
        try:
            return cls(object)
        except ValueError:
            return None

    def __str__(self):
        return self.value


class TYPES(Vocabulary):
    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"
    NULL = "null"


class FORMATS(Vocabulary):
    RELATIVE_JSON_POINTER = "relative-json-pointer"
    JSON_POINTER = "json-pointer"
    UUID = "uuid"
    REGEX = "regex"
    IPV6 = "ipv6"
    IPV4 = "ipv4"
    HOSTNAME = "hostname"
    IDN_HOSTNAME = "idn-hostname"
    EMAIL = "email"
    IDN_EMAIL = "idn-email"
    URL = "url"
    URI_TEMPLATE = "uri-template"
    URI_REFERENCE = "uri-reference"
    URI = "uri"
    IRI = "iri"
    IRI_REFERENCE = "iri-reference"
    TIME = "time"
    DATE = "date"
    DATE_TIME = "date-time"


# the json types a keyword family accepts
COMPATIBLE = {
    "string": {"string"},
    "number": {"number", "integer"},
    "integer": {"number", "integer"},
    "array": {"array"},
    "object": {"object"},
}
