"""NMEA data types for decoded sentences.

This module defines the immutable records produced by the sentence handlers,
together with the enumerations they share.

Design Decisions:
    1. Optional fields (float | None): NMEA fields may be empty, indicated by
       consecutive commas or by a sentence truncated before its last fields.
       None means "no data received", never "measured zero". Each field is
       optional on its own; a record with only a timestamp is still a record.

    2. Frozen dataclasses: a record is built once by its handler and never
       mutated afterwards. Records hold plain values only (floats, ints,
       enums, datetimes), not slices of the original sentence.

    3. Derived values as properties: navigation validity and unit conversions
       are computed from the stored fields, so they can never disagree with
       them and are never stored as a defaulted False/0.

    4. Closed result type: ``ParsedMessage`` lists every record type plus the
       ``Incomplete`` marker. Decode failures are raised as ``ParseError``.
"""

import enum
from dataclasses import dataclass
from datetime import datetime, time
from typing import ClassVar

__all__ = [
    "INCOMPLETE",
    "FaaMode",
    "GgaData",
    "Incomplete",
    "NavigationSystem",
    "ParsedMessage",
    "RmcData",
    "VtgData",
]

# Conversion factor: km/h to m/s
# 1 km/h = 1000m / 3600s = 1/3.6 m/s
_KILOMETERS_PER_HOUR_TO_METERS_PER_SECOND = 3.6


class NavigationSystem(enum.Enum):
    """Satellite system a sentence originates from, derived from its talker id.

    Talker ids:
        GP = GPS (USA)
        GL = GLONASS (Russia)
        GA = Galileo (Europe)
        GB, BD = BeiDou (China)
        GI = NavIC (India)
        GQ = QZSS (Japan)
        GN = Multi-GNSS (combined solution)
    Anything else maps to OTHER.
    """

    GPS = "GPS"
    GLONASS = "GLONASS"
    GALILEO = "Galileo"
    BEIDOU = "BeiDou"
    NAVIC = "NavIC"
    QZSS = "QZSS"
    COMBINED = "Combined"
    OTHER = "Other"

    @classmethod
    def from_talker_id(cls, talker_id: str) -> "NavigationSystem":
        return _TALKER_IDS.get(talker_id, cls.OTHER)


_TALKER_IDS: dict[str, NavigationSystem] = {
    "GP": NavigationSystem.GPS,
    "GL": NavigationSystem.GLONASS,
    "GA": NavigationSystem.GALILEO,
    "GB": NavigationSystem.BEIDOU,
    "BD": NavigationSystem.BEIDOU,
    "GI": NavigationSystem.NAVIC,
    "GQ": NavigationSystem.QZSS,
    "GN": NavigationSystem.COMBINED,
}


class FaaMode(enum.Enum):
    """FAA mode indicator (NMEA 2.3+), carried by RMC and VTG."""

    AUTONOMOUS = "A"
    DIFFERENTIAL = "D"
    ESTIMATED = "E"
    FLOAT_RTK = "F"
    MANUAL = "M"
    NOT_VALID = "N"
    PRECISE = "P"
    FIXED_RTK = "R"
    SIMULATOR = "S"


@dataclass(frozen=True)
class RmcData:
    """Parsed RMC (Recommended Minimum Specific GNSS Data) sentence.

    RMC carries the minimum position, velocity and time a receiver reports.

    Attributes:
        source: Navigation system the sentence came from.

        timestamp: Fix instant in UTC, combined from the HHMMSS time and
            DDMMYY date fields. None if either was empty or unparsable.

        status_active: True for an active fix ('A' or 'D'), False for a void
            one ('V'). None if the field was empty.

        latitude: Latitude in decimal degrees, positive=North.
            None if the field was empty.

        longitude: Longitude in decimal degrees, positive=East.
            None if the field was empty.

        sog_knots: Speed over ground in knots. None if empty.

        bearing: Track angle in degrees relative to true north. None if empty.

        variation: Magnetic variation in degrees, positive=East,
            negative=West. None if the magnitude field was empty.

        mode: FAA mode indicator. None on receivers older than NMEA 2.3.

    Example:
        >>> rmc = NmeaParser().parse_sentence(
        ...     "$GPRMC,225446,A,4916.45,N,12311.12,W,000.5,054.7,191120,020.3,E*67"
        ... )
        >>> rmc.timestamp
        datetime.datetime(2020, 11, 19, 22, 54, 46, tzinfo=datetime.timezone.utc)
        >>> rmc.variation
        20.3
    """

    sentence_kind: ClassVar[str] = "RMC"

    source: NavigationSystem
    timestamp: datetime | None
    status_active: bool | None
    latitude: float | None
    longitude: float | None
    sog_knots: float | None
    bearing: float | None
    variation: float | None
    mode: FaaMode | None = None


@dataclass(frozen=True)
class GgaData:
    """Parsed GGA (Global Positioning System Fix Data) sentence.

    Attributes:
        source: Navigation system the sentence came from.

        utc_time: Time of fix (UTC, timezone-aware). None if empty or
            unparsable.

        latitude: Latitude in decimal degrees, positive=North.

        longitude: Longitude in decimal degrees, positive=East.

        fix_quality: GPS fix quality indicator:
            0 = Invalid (no fix)
            1 = GPS fix (SPS - Standard Positioning Service)
            2 = DGPS fix (Differential GPS)
            4 = RTK Fixed (centimeter-level accuracy)
            5 = RTK Float (decimeter-level accuracy, converging)
            6 = Dead reckoning mode
            None if the field was empty.

        num_satellites: Number of satellites used in the fix solution.

        horizontal_dilution_of_precision: HDOP value. Lower is better.

        altitude_meters: Altitude above mean sea level (MSL) in meters.

        geoid_height_meters: Height of geoid (MSL) above WGS84 ellipsoid.

        dgps_age_seconds: Age of the differential correction in seconds.

        dgps_station_id: Differential reference station id.

    Every attribute except ``source`` is None when its field was empty.
    """

    sentence_kind: ClassVar[str] = "GGA"

    source: NavigationSystem
    utc_time: time | None
    latitude: float | None
    longitude: float | None
    fix_quality: int | None
    num_satellites: int | None
    horizontal_dilution_of_precision: float | None
    altitude_meters: float | None
    geoid_height_meters: float | None
    dgps_age_seconds: float | None = None
    dgps_station_id: int | None = None

    @property
    def valid(self) -> bool:
        """Navigation validity: True only with a reported fix quality above 0."""
        return self.fix_quality is not None and self.fix_quality > 0


@dataclass(frozen=True)
class VtgData:
    """Parsed VTG (Track Made Good and Ground Speed) sentence.

    Attributes:
        source: Navigation system the sentence came from.

        track_true_degrees: Track relative to true north in degrees.
            None when stationary (no heading without movement).

        track_magnetic_degrees: Track relative to magnetic north in degrees.

        speed_knots: Ground speed in knots.

        speed_kilometers_per_hour: Ground speed in km/h.

        mode: FAA mode indicator. None on receivers older than NMEA 2.3.
    """

    sentence_kind: ClassVar[str] = "VTG"

    source: NavigationSystem
    track_true_degrees: float | None
    track_magnetic_degrees: float | None
    speed_knots: float | None
    speed_kilometers_per_hour: float | None
    mode: FaaMode | None = None

    @property
    def speed_meters_per_second(self) -> float | None:
        """Ground speed in m/s, derived from the km/h field."""
        if self.speed_kilometers_per_hour is None:
            return None
        return (
            self.speed_kilometers_per_hour
            / _KILOMETERS_PER_HOUR_TO_METERS_PER_SECOND
        )

    @property
    def valid(self) -> bool:
        """Navigation validity: mode must exist and not be 'N' (not valid)."""
        return self.mode is not None and self.mode is not FaaMode.NOT_VALID


@dataclass(frozen=True)
class Incomplete:
    """Marker for a recognized sentence that needs further input.

    Multi-part sentence families return this while they wait for the
    remaining fragments. Callers skip it and feed the next sentence.
    """

    sentence_kind: ClassVar[str] = "INCOMPLETE"


INCOMPLETE = Incomplete()

ParsedMessage = RmcData | GgaData | VtgData | Incomplete
