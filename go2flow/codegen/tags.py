"""
Struct tag interpretation.

A Go struct tag is a string literal of space-separated key:"value" pairs,
e.g. `json:"name,omitempty" db:"name"`. Only the value of one key (json
by default) matters here: its first comma-separated segment is the
serialized field name and an `omitempty` option makes the field optional.
Unknown options are ignored.

Parsing follows the conventions of Go's reflect.StructTag: a malformed
tag never raises, it simply yields no name.
"""

import json
from dataclasses import dataclass
from typing import Optional, Tuple


OMITEMPTY = 'omitempty'
OMIT_NAME = '-'


@dataclass(frozen=True)
class TagInfo:
    """Field name override and optionality read from a struct tag."""
    name: str = ''
    optional: bool = False
    malformed: bool = False

    @property
    def is_omitted(self) -> bool:
        """A field with no name, or the name "-", is never serialized."""
        return self.name in ('', OMIT_NAME)


def unquote(literal: str) -> Optional[str]:
    """Strip the quotes from a raw (`...`) or interpreted ("...") Go string literal."""
    if len(literal) < 2 or literal[0] != literal[-1]:
        return None
    if literal[0] == '`':
        return literal[1:-1]
    if literal[0] == '"':
        try:
            value = json.loads(literal)
        except ValueError:
            return None
        return value if isinstance(value, str) else None
    return None


def lookup_tag(tag: str, key: str) -> Tuple[Optional[str], bool]:
    """
    Find the value stored under key in an unquoted struct tag.

    Args:
        tag: The tag contents, without the surrounding literal quotes
        key: The tag key to look up (e.g. 'json')

    Returns:
        (value, malformed): value is None when the key is absent or the
        tag could not be read up to it; malformed reports a syntax error
    """
    while tag:
        tag = tag.lstrip(' ')
        if not tag:
            break

        # Key: everything up to the colon, no spaces, quotes or control chars
        i = 0
        while i < len(tag) and tag[i] > ' ' and tag[i] not in ':"\x7f':
            i += 1
        if i == 0 or i + 1 >= len(tag) or tag[i] != ':' or tag[i + 1] != '"':
            return None, True
        name = tag[:i]
        tag = tag[i + 1:]

        # Quoted value, honouring backslash escapes
        i = 1
        while i < len(tag) and tag[i] != '"':
            if tag[i] == '\\':
                i += 1
            i += 1
        if i >= len(tag):
            return None, True
        quoted = tag[:i + 1]
        tag = tag[i + 1:]

        if name == key:
            value = unquote(quoted)
            if value is None:
                return None, True
            return value, False

    return None, False


def parse_tag(raw: Optional[str], key: str = 'json') -> TagInfo:
    """
    Interpret a field's raw tag literal.

    Args:
        raw: The tag literal as written in source, quotes included, or None
        key: The tag key holding the serialized name

    Returns:
        TagInfo with the serialized name and the omitempty flag
    """
    if raw is None:
        return TagInfo()

    tag = unquote(raw)
    if tag is None:
        return TagInfo(malformed=True)

    value, malformed = lookup_tag(tag, key)
    if value is None:
        return TagInfo(malformed=malformed)

    name, _, options = value.partition(',')
    optional = OMITEMPTY in options.split(',') if options else False
    return TagInfo(name=name, optional=optional)
