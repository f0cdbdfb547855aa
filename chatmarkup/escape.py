"""Escaping and attribute-key case conversion for the markup wire format.

The wire format only ever escapes four characters:
  &  →  &amp;     (always, and first)
  <  →  &lt;      (always)
  >  →  &gt;      (always)
  "  →  &quot;    (inside quoted attribute values only)

Unescaping runs in the opposite direction with ``&amp;`` handled last, so a
literal ``&amp;lt;`` comes back as ``&lt;`` and not as ``<``.
"""

import re

_CAMEL_RE = re.compile(r'[_-][a-z]')

# Character classes for hyphenate()
_DELIMITER = 0
_UPPERCASE = 1
_LOWERCASE = 2


def escape(source: str, inline: bool = False) -> str:
    """Escape text for the wire. ``inline`` also escapes double quotes."""
    result = (
        source
        .replace('&', '&amp;')
        .replace('<', '&lt;')
        .replace('>', '&gt;')
    )
    if inline:
        result = result.replace('"', '&quot;')
    return result


def unescape(source: str) -> str:
    """Reverse escape(). Order matters: ``&amp;`` must be decoded last."""
    return (
        source
        .replace('&lt;', '<')
        .replace('&gt;', '>')
        .replace('&quot;', '"')
        .replace('&amp;', '&')
    )


def capitalize(source: str) -> str:
    return source[:1].upper() + source[1:]


def camelize(source: str) -> str:
    """``at-all`` / ``at_all`` → ``atAll``."""
    return _CAMEL_RE.sub(lambda m: m.group(0)[1].upper(), source)


def hyphenate(source: str) -> str:
    """``noDisabled`` → ``no-disabled``.

    A run of capitals is kept together as one word unless the last capital
    starts a new lowercase word: ``fooBARBaz`` → ``foo-bar-baz``.
    """
    output = []
    state = _DELIMITER
    for index, char in enumerate(source):
        if 'A' <= char <= 'Z':
            if state == _UPPERCASE:
                following = source[index + 1:index + 2]
                if following and 'a' <= following <= 'z':
                    output.append('-')
            elif state != _DELIMITER:
                output.append('-')
            output.append(char.lower())
            state = _UPPERCASE
        elif 'a' <= char <= 'z':
            output.append(char)
            state = _LOWERCASE
        elif char in '-_':
            output.append('-')
            state = _DELIMITER
        else:
            output.append(char)
    return ''.join(output)
