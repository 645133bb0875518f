"""NMEA checksum calculation and validation.

The checksum is the XOR of every character between the leading '$' and the
'*' delimiter, written after the '*' as two hexadecimal digits (either case):

    $GPRMC,225446,A,4916.45,N,12311.12,W,000.5,054.7,191120,020.3,E*67
     \\________________________ XOR ____________________________/ 0x67
"""

import functools
import operator
import re

__all__ = ["calculate_checksum", "has_checksum", "validate_checksum"]

_FRAMED_SENTENCE = re.compile(r"\$([^*]*)\*([0-9A-Fa-f]{2})", re.ASCII)


def calculate_checksum(content: str) -> int:
    """XOR the character codes of ``content``.

    Args:
        content: The text between '$' and '*' (both excluded)

    Returns:
        Checksum value in the range 0-255

    Example:
        >>> f"{calculate_checksum('GPRMC,225446,A,,,,,,,070809,,'):02X}"
        '23'
    """
    return functools.reduce(operator.xor, map(ord, content), 0)


def has_checksum(sentence: str) -> bool:
    return "*" in sentence


def validate_checksum(sentence: str) -> bool:
    """Check a sentence against the checksum it carries.

    Surrounding whitespace is ignored. Anything that is not exactly
    ``$<content>*hh`` (no '$', no '*', a truncated or non-hex checksum,
    trailing characters) counts as invalid.

    Example:
        >>> validate_checksum("$GPRMC,225446,A,,,,,,,070809,,*23")
        True
        >>> validate_checksum("$GPRMC,225446,A,,,,,,,070809,,*2")
        False
    """
    match = _FRAMED_SENTENCE.fullmatch(sentence.strip())
    if match is None:
        return False
    content, provided = match.groups()
    return calculate_checksum(content) == int(provided, 16)
