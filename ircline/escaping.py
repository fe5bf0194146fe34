## escaping.py
# IRCv3 tag value escaping.
import logging

__all__ = [ 'decode', 'encode', 'ESCAPE_CHARACTER' ]

logger = logging.getLogger(__name__)

ESCAPE_CHARACTER = '\\'

# Escape code (the character after the backslash) -> decoded character.
DECODE_TABLE = {
    ':': ';',
    's': ' ',
    '\\': '\\',
    'r': '\r',
    'n': '\n'
}

# Decoded character -> full escape sequence.
ENCODE_TABLE = {
    replacement: ESCAPE_CHARACTER + code for code, replacement in DECODE_TABLE.items()
}


def decode(raw):
    """
    Unescape a raw tag value.
    Unknown escapes decode to the escaped character itself and a dangling backslash at the end is dropped,
    as IRC escapes != python escapes.
    """
    decoded = []
    chars = iter(raw)

    for ch in chars:
        if ch != ESCAPE_CHARACTER:
            decoded.append(ch)
            continue

        code = next(chars, None)
        if code is None:
            logger.debug('Dropping dangling escape character in tag value: %r', raw)
            break

        if code in DECODE_TABLE:
            decoded.append(DECODE_TABLE[code])
        else:
            logger.debug('Unknown escape sequence %r in tag value, passing %r through.', ch + code, code)
            decoded.append(code)

    return ''.join(decoded)


def encode(value):
    """ Escape a tag value for the wire. """
    return ''.join(ENCODE_TABLE.get(ch, ch) for ch in value)
