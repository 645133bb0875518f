"""Helper factories for server tests."""

from datetime import datetime, time, timezone

from navsentence.nmea.types import (
    FaaMode,
    GgaData,
    NavigationSystem,
    RmcData,
    VtgData,
)


def make_rmc(status_active: bool | None = True) -> RmcData:
    return RmcData(
        source=NavigationSystem.GPS,
        timestamp=datetime(2020, 11, 19, 22, 54, 46, tzinfo=timezone.utc),
        status_active=status_active,
        latitude=49.2741667,
        longitude=-123.1853333,
        sog_knots=0.5,
        bearing=54.7,
        variation=20.3,
    )


def make_gga() -> GgaData:
    return GgaData(
        source=NavigationSystem.COMBINED,
        utc_time=time(12, 0, 0, tzinfo=timezone.utc),
        latitude=45.0,
        longitude=9.0,
        fix_quality=1,
        num_satellites=8,
        horizontal_dilution_of_precision=1.0,
        altitude_meters=100.0,
        geoid_height_meters=50.0,
    )


def make_vtg(mode: FaaMode | None = FaaMode.AUTONOMOUS) -> VtgData:
    return VtgData(
        source=NavigationSystem.COMBINED,
        track_true_degrees=12.3,
        track_magnetic_degrees=None,
        speed_knots=4.5,
        speed_kilometers_per_hour=8.3,
        mode=mode,
    )
