"""GGA sentence handler.

GGA (Global Positioning System Fix Data) reports the fix itself: where the
receiver is, how high, how good the solution is and how many satellites
went into it. The fix quality codes are listed on ``GgaData``.

    $GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F
           |         |          |            | |  |   |       |      | |
           |         |          |            | |  |   |       |      | +-- DGPS station id
           |         |          |            | |  |   |       |      +-- DGPS age (s)
           |         |          |            | |  |   |       +-- Geoid separation, M
           |         |          |            | |  |   +-- Altitude above MSL, M
           |         |          |            | |  +-- HDOP
           |         |          |            | +-- Satellites in use
           |         |          |            +-- Fix quality
           |         |          +-- Longitude, E/W
           |         +-- Latitude, N/S
           +-- UTC time of day (no date in GGA)
"""

from navsentence.nmea.fields import (
    parse_latitude,
    parse_longitude,
    parse_number_field,
    parse_time_of_day,
    pick_field,
    split_fields,
)
from navsentence.nmea.types import GgaData, NavigationSystem, ParsedMessage

__all__ = ["handle"]

_SENTENCE_KIND = "GGA"


def handle(sentence: str, nav_system: NavigationSystem) -> ParsedMessage:
    """Decode a GGA sentence into a ``GgaData`` record.

    Field positions:
        1 time, 2-3 latitude, 4-5 longitude, 6 fix quality, 7 satellites,
        8 HDOP, 9 altitude, 11 geoid separation, 13 DGPS age,
        14 DGPS station id

    Fields 10 and 12 are the unit letters ('M') and carry no data.

    Note: an empty fix quality stays None rather than being read as 0;
    ``GgaData.valid`` is False for both.
    """
    fields = split_fields(sentence)

    return GgaData(
        source=nav_system,
        utc_time=parse_time_of_day(pick_field(fields, 1)),
        latitude=parse_latitude(fields, 2, _SENTENCE_KIND),
        longitude=parse_longitude(fields, 4, _SENTENCE_KIND),
        fix_quality=parse_number_field(fields, 6, _SENTENCE_KIND, int),
        num_satellites=parse_number_field(fields, 7, _SENTENCE_KIND, int),
        horizontal_dilution_of_precision=parse_number_field(
            fields, 8, _SENTENCE_KIND
        ),
        altitude_meters=parse_number_field(fields, 9, _SENTENCE_KIND),
        geoid_height_meters=parse_number_field(fields, 11, _SENTENCE_KIND),
        dgps_age_seconds=parse_number_field(fields, 13, _SENTENCE_KIND),
        dgps_station_id=parse_number_field(fields, 14, _SENTENCE_KIND, int),
    )
