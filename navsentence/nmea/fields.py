"""NMEA field parsing utilities.

This module provides the tokenizer and the primitive decoders every sentence
handler is built from. NMEA fields are positional and comma-separated, and any
of them may be empty (consecutive commas) or missing altogether (a receiver
that truncates the sentence after its last populated field). Both cases decode
to None, so callers can tell "no data" from "zero value".

Present but malformed data is a different matter:

    numerals      -> MalformedFieldError
    enumerations  -> InvalidEnumerationError
    date / time   -> None (lenient, see parse_date_time)
"""

import logging
import math
import re
from collections.abc import Mapping, Sequence
from datetime import datetime, time, timezone
from typing import TypeVar

from navsentence.nmea.errors import InvalidEnumerationError, MalformedFieldError
from navsentence.nmea.types import FaaMode

__all__ = [
    "FAA_MODE_LETTERS",
    "parse_date_time",
    "parse_latitude",
    "parse_letter_field",
    "parse_longitude",
    "parse_number_field",
    "parse_time_of_day",
    "pick_field",
    "split_fields",
]

logger = logging.getLogger(__name__)

_Number = TypeVar("_Number", int, float)
_Value = TypeVar("_Value")

FAA_MODE_LETTERS: Mapping[str, FaaMode] = {mode.value: mode for mode in FaaMode}

_LATITUDE_HEMISPHERES = {"N": 1.0, "S": -1.0}
_LONGITUDE_HEMISPHERES = {"E": 1.0, "W": -1.0}

# DDDMM.MMMM: the 2 digits before the decimal point are always minutes,
# the up to 3 digits before them are whole degrees.
_COORDINATE_PATTERN = re.compile(r"(\d{0,3})(\d\d(?:\.\d*)?)", re.ASCII)

_NUMERAL_PATTERNS = {
    float: re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)", re.ASCII),
    int: re.compile(r"[+-]?\d+", re.ASCII),
}

_TIME_PATTERN = re.compile(r"(\d\d)(\d\d)(\d\d)(?:\.(\d*))?", re.ASCII)
_DATE_PATTERN = re.compile(r"(\d\d)(\d\d)(\d\d)", re.ASCII)


def split_fields(sentence: str) -> list[str]:
    """Split a sentence into its positional fields.

    The leading '$' and anything from the checksum delimiter '*' onwards are
    dropped. Empty fields are preserved, so positions never shift.

    Example:
        >>> split_fields("$GPRMC,225446,A,,,*23")
        ['GPRMC', '225446', 'A', '', '', '']
    """
    content = sentence.strip()
    if content[:1] in ("$", "!"):
        content = content[1:]
    end = content.find("*")
    if end != -1:
        content = content[:end]
    return content.split(",")


def pick_field(fields: Sequence[str], index: int) -> str:
    """Return the field at ``index``, or "" when the sentence is shorter.

    Positions past the end of a truncated sentence read exactly like empty
    fields.
    """
    if index < len(fields):
        return fields[index]
    return ""


def parse_number_field(
    fields: Sequence[str],
    index: int,
    sentence_kind: str,
    number_type: type[_Number] = float,  # type: ignore[assignment]
) -> _Number | None:
    """Parse the field at ``index`` as a number, returning None if empty.

    Args:
        fields: Tokenized sentence fields
        index: Field position (0 is the talker/type field)
        sentence_kind: Sentence type used in the error message (e.g. "RMC")
        number_type: ``float`` or ``int``

    Returns:
        Parsed value, or None if the field is empty or beyond the end of the
        sentence

    Raises:
        MalformedFieldError: If the field is present but not a plain decimal
            numeral (digits, optional sign, optional decimal point)

    Example:
        >>> parse_number_field(["GPRMC", "000.5"], 1, "RMC")
        0.5
        >>> parse_number_field(["GPRMC", ""], 1, "RMC")  # empty field
        None
    """
    value = pick_field(fields, index)
    if not value:
        return None
    # Python-only spellings such as "nan", "1_0" or " 5" are not NMEA numerals
    if _NUMERAL_PATTERNS[number_type].fullmatch(value) is not None:
        try:
            number = number_type(value)
        except ValueError:
            pass  # int digit limit
        else:
            # A long enough digit string still overflows a float to inf
            if not isinstance(number, float) or math.isfinite(number):
                return number
    raise MalformedFieldError(
        f"Failed to parse {sentence_kind} field {index}: {value!r}",
        sentence_kind=sentence_kind,
        field_index=index,
        value=value,
    )


def parse_letter_field(
    fields: Sequence[str],
    index: int,
    alphabet: Mapping[str, _Value],
    sentence_kind: str,
    description: str,
) -> _Value | None:
    """Map a single-letter field through ``alphabet``.

    Unlike the date/time decoders this one is strict: an unrecognized letter
    fails the whole sentence.

    Args:
        fields: Tokenized sentence fields
        index: Field position
        alphabet: Recognized letters and the values they stand for
        sentence_kind: Sentence type used in the error message
        description: Human-readable field name used in the error message

    Returns:
        The mapped value, or None if the field is empty

    Raises:
        InvalidEnumerationError: If the field holds any other value

    Example:
        >>> parse_letter_field(["GPRMC", "", "V"], 2, {"A": True, "V": False},
        ...                    "RMC", "navigation receiver status")
        False
    """
    value = pick_field(fields, index)
    if not value:
        return None
    try:
        return alphabet[value]
    except KeyError:
        raise InvalidEnumerationError(
            f"Invalid {sentence_kind} {description}: {value!r}",
            sentence_kind=sentence_kind,
            field_index=index,
            value=value,
        ) from None


def _split_degrees_minutes(
    value: str, index: int, sentence_kind: str, axis: str
) -> tuple[int, float]:
    """Split a DDDMM.MMMM coordinate into degrees and minutes.

    Example:
        >>> _split_degrees_minutes("4807.038", 2, "GGA", "latitude")  # 48° 07.038'
        (48, 7.038)
        >>> _split_degrees_minutes("01131.000", 4, "GGA", "longitude")  # 11° 31.000'
        (11, 31.0)
    """
    match = _COORDINATE_PATTERN.fullmatch(value)
    if match is None:
        raise MalformedFieldError(
            f"Failed to parse {sentence_kind} {axis} field {index}: {value!r}",
            sentence_kind=sentence_kind,
            field_index=index,
            value=value,
        )
    degrees, minutes = match.groups()
    return int(degrees or "0"), float(minutes)


def _convert_to_decimal_degrees(
    fields: Sequence[str],
    index: int,
    hemispheres: Mapping[str, float],
    sentence_kind: str,
    axis: str,
) -> float | None:
    value = pick_field(fields, index)
    if not value:
        return None

    hemisphere = pick_field(fields, index + 1)
    sign = hemispheres.get(hemisphere)
    if sign is None:
        raise InvalidEnumerationError(
            f"Invalid {sentence_kind} {axis} hemisphere: {hemisphere!r}",
            sentence_kind=sentence_kind,
            field_index=index + 1,
            value=hemisphere,
        )

    degrees, minutes = _split_degrees_minutes(value, index, sentence_kind, axis)
    return sign * (degrees + minutes / 60.0)


def parse_latitude(
    fields: Sequence[str], index: int, sentence_kind: str
) -> float | None:
    """Convert an NMEA latitude (DDMM.MMMM + N/S) to decimal degrees.

    The numeral sits at ``index`` and its hemisphere letter right after it.
    The conversion formula is:
        decimal_degrees = degrees + (minutes / 60)
    negated for the southern hemisphere.

    Args:
        fields: Tokenized sentence fields
        index: Position of the DDMM.MMMM numeral (e.g., "4916.45")
        sentence_kind: Sentence type used in error messages

    Returns:
        Decimal degrees (positive for N, negative for S), or None if the
        numeral is empty

    Raises:
        InvalidEnumerationError: If the numeral is present and the hemisphere
            at ``index + 1`` is not N or S
        MalformedFieldError: If the numeral is not a valid DDMM.MMMM value

    Example:
        >>> parse_latitude(["GPRMC", "225446", "A", "4916.45", "N"], 3, "RMC")
        49.274166...
    """
    return _convert_to_decimal_degrees(
        fields, index, _LATITUDE_HEMISPHERES, sentence_kind, "latitude"
    )


def parse_longitude(
    fields: Sequence[str], index: int, sentence_kind: str
) -> float | None:
    """Convert an NMEA longitude (DDDMM.MMMM + E/W) to decimal degrees.

    Same rules as ``parse_latitude`` with E/W as the valid hemispheres.

    Example:
        >>> parse_longitude(["GPRMC", "", "", "", "", "12311.12", "W"], 5, "RMC")
        -123.18533...
    """
    return _convert_to_decimal_degrees(
        fields, index, _LONGITUDE_HEMISPHERES, sentence_kind, "longitude"
    )


def _current_century() -> int:
    return datetime.now(timezone.utc).year // 100 * 100


def _parse_clock(hhmmss: str) -> tuple[int, int, int, int]:
    """Split HHMMSS[.sss] into hour, minute, second and microsecond."""
    match = _TIME_PATTERN.fullmatch(hhmmss)
    if match is None:
        raise ValueError(f"not a HHMMSS time: {hhmmss!r}")
    hour, minute, second, fraction = match.groups()
    microsecond = int((fraction or "").ljust(6, "0")[:6])
    return int(hour), int(minute), int(second), microsecond


def parse_date_time(ddmmyy: str, hhmmss: str) -> datetime | None:
    """Combine a DDMMYY date and a HHMMSS time into one UTC timestamp.

    The two-digit year is placed in the current century. Fractional seconds
    ("225446.50") are kept as microseconds.

    This decoder is lenient: an empty or invalid date or time yields None
    instead of failing the sentence.

    Example:
        >>> parse_date_time("191120", "225446")
        datetime.datetime(2020, 11, 19, 22, 54, 46, tzinfo=datetime.timezone.utc)
        >>> parse_date_time("", "225446")
        None
    """
    if not ddmmyy or not hhmmss:
        return None
    try:
        match = _DATE_PATTERN.fullmatch(ddmmyy)
        if match is None:
            raise ValueError(f"not a DDMMYY date: {ddmmyy!r}")
        day, month, year = (int(group) for group in match.groups())
        hour, minute, second, microsecond = _parse_clock(hhmmss)
        return datetime(
            _current_century() + year,
            month,
            day,
            hour,
            minute,
            second,
            microsecond,
            tzinfo=timezone.utc,
        )
    except ValueError as e:
        logger.debug("Discarding unparsable date/time %r %r: %s", ddmmyy, hhmmss, e)
        return None


def parse_time_of_day(hhmmss: str) -> time | None:
    """Parse a HHMMSS[.sss] field into a UTC time of day.

    Lenient like ``parse_date_time``: empty or invalid input yields None.

    Example:
        >>> parse_time_of_day("123519.00")
        datetime.time(12, 35, 19, tzinfo=datetime.timezone.utc)
    """
    if not hhmmss:
        return None
    try:
        hour, minute, second, microsecond = _parse_clock(hhmmss)
        return time(hour, minute, second, microsecond, tzinfo=timezone.utc)
    except ValueError as e:
        logger.debug("Discarding unparsable time %r: %s", hhmmss, e)
        return None
