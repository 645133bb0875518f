"""VTG sentence handler.

VTG (Track Made Good and Ground Speed) provides velocity information from GNSS.

VTG Sentence Format:
    $GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B
           |     | |     | |     | |     | |
           |     | |     | |     | |     | +-- Mode indicator (FAA, NMEA 2.3+)
           |     | |     | |     | +-----+-- Speed in km/h
           |     | |     | +-----+-- Speed in knots
           |     | +-----+-- Track (magnetic north, degrees)
           +-----+-- Track (true north, degrees)

Note: When stationary, the track angle may be empty (no heading when not moving).
"""

from navsentence.nmea.fields import (
    FAA_MODE_LETTERS,
    parse_letter_field,
    parse_number_field,
    split_fields,
)
from navsentence.nmea.types import NavigationSystem, ParsedMessage, VtgData

__all__ = ["handle"]

_SENTENCE_KIND = "VTG"


def handle(sentence: str, nav_system: NavigationSystem) -> ParsedMessage:
    """Decode a VTG sentence into a ``VtgData`` record.

    Maps NMEA field indices to VtgData attributes:
        fields[1] -> track_true_degrees
        fields[3] -> track_magnetic_degrees
        fields[5] -> speed_knots
        fields[7] -> speed_kilometers_per_hour
        fields[9] -> mode (FAA mode indicator, if present)

    The unit letters in fields 2, 4, 6 and 8 are not checked.
    """
    fields = split_fields(sentence)

    return VtgData(
        source=nav_system,
        track_true_degrees=parse_number_field(fields, 1, _SENTENCE_KIND),
        track_magnetic_degrees=parse_number_field(fields, 3, _SENTENCE_KIND),
        speed_knots=parse_number_field(fields, 5, _SENTENCE_KIND),
        speed_kilometers_per_hour=parse_number_field(fields, 7, _SENTENCE_KIND),
        mode=parse_letter_field(
            fields, 9, FAA_MODE_LETTERS, _SENTENCE_KIND, "mode indicator"
        ),
    )
