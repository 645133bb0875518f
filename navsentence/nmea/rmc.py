"""RMC sentence handler.

RMC (Recommended Minimum Specific GNSS Data) is the minimum position,
velocity and time report every receiver emits.

RMC Sentence Format:
    $GPRMC,225446,A,4916.45,N,12311.12,W,000.5,054.7,191120,020.3,E,A*67
           |      | |       | |        | |     |     |      |     | |
           |      | |       | |        | |     |     |      |     | +-- FAA mode (NMEA 2.3+)
           |      | |       | |        | |     |     |      +-----+-- Magnetic variation + E/W
           |      | |       | |        | |     |     +-- Date (DDMMYY)
           |      | |       | |        | |     +-- Track angle (degrees true)
           |      | |       | |        | +-- Speed over ground (knots)
           |      | |       | +--------+-- Longitude + E/W
           |      | +-------+-- Latitude + N/S
           |      +-- Status (A=active, D=differential, V=void)
           +-- UTC time (HHMMSS)

Receivers drop trailing fields they have no data for; a missing field decodes
exactly like an empty one.
"""

from navsentence.nmea.errors import InvalidEnumerationError
from navsentence.nmea.fields import (
    FAA_MODE_LETTERS,
    parse_date_time,
    parse_latitude,
    parse_letter_field,
    parse_longitude,
    parse_number_field,
    pick_field,
    split_fields,
)
from navsentence.nmea.types import NavigationSystem, ParsedMessage, RmcData

__all__ = ["handle"]

_SENTENCE_KIND = "RMC"

_STATUS_LETTERS = {
    "A": True,  # Active
    "D": True,  # Differential
    "V": False,  # Void
}

_VARIATION_SIDES = {"E": 1.0, "W": -1.0}


def _parse_variation(fields: list[str]) -> float | None:
    """Combine the variation magnitude (field 10) with its E/W side (field 11).

    A magnitude without a valid side letter, including an empty one, is an
    error: the sign of the variation would be unknown.
    """
    magnitude = parse_number_field(fields, 10, _SENTENCE_KIND)
    if magnitude is None:
        return None

    side = pick_field(fields, 11)
    sign = _VARIATION_SIDES.get(side)
    if sign is None:
        raise InvalidEnumerationError(
            f"Invalid {_SENTENCE_KIND} variation side: {side!r}",
            sentence_kind=_SENTENCE_KIND,
            field_index=11,
            value=side,
        )
    return sign * magnitude


def handle(sentence: str, nav_system: NavigationSystem) -> ParsedMessage:
    """Decode an RMC sentence into an ``RmcData`` record.

    Maps NMEA field indices to RmcData attributes:
        fields[1] + fields[9]   -> timestamp (HHMMSS + DDMMYY)
        fields[2]               -> status_active
        fields[3], fields[4]    -> latitude
        fields[5], fields[6]    -> longitude
        fields[7]               -> sog_knots
        fields[8]               -> bearing
        fields[10], fields[11]  -> variation
        fields[12]              -> mode

    Args:
        sentence: RMC sentence text, with or without '$' and checksum
        nav_system: Navigation system derived from the talker id

    Returns:
        The decoded ``RmcData``

    Raises:
        MalformedFieldError: If a numeric field is present but unparsable
        InvalidEnumerationError: If a status, hemisphere, variation side or
            mode letter is not recognized
    """
    fields = split_fields(sentence)

    return RmcData(
        source=nav_system,
        timestamp=parse_date_time(pick_field(fields, 9), pick_field(fields, 1)),
        status_active=parse_letter_field(
            fields, 2, _STATUS_LETTERS, _SENTENCE_KIND, "navigation receiver status"
        ),
        latitude=parse_latitude(fields, 3, _SENTENCE_KIND),
        longitude=parse_longitude(fields, 5, _SENTENCE_KIND),
        sog_knots=parse_number_field(fields, 7, _SENTENCE_KIND),
        bearing=parse_number_field(fields, 8, _SENTENCE_KIND),
        variation=_parse_variation(fields),
        mode=parse_letter_field(
            fields, 12, FAA_MODE_LETTERS, _SENTENCE_KIND, "mode indicator"
        ),
    )
