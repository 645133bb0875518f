"""Tests for GGA sentence decoding."""

from datetime import time, timezone

import pytest

from navsentence.nmea import gga
from navsentence.nmea.errors import InvalidEnumerationError, MalformedFieldError
from navsentence.nmea.types import GgaData, NavigationSystem

COMBINED = NavigationSystem.COMBINED


class TestHandleGGA:
    """Tests for gga.handle."""

    def test_valid_gga_with_fix(self):
        sentence = "$GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F"
        result = gga.handle(sentence, COMBINED)
        assert isinstance(result, GgaData)
        assert result.source is COMBINED
        assert result.utc_time == time(12, 35, 19, tzinfo=timezone.utc)
        assert result.latitude == pytest.approx(48.1173, rel=1e-4)
        assert result.longitude == pytest.approx(11.5166667, rel=1e-4)
        assert result.fix_quality == 1
        assert result.num_satellites == 8
        assert result.horizontal_dilution_of_precision == pytest.approx(0.9)
        assert result.altitude_meters == pytest.approx(545.4)
        assert result.geoid_height_meters == pytest.approx(47.0)
        assert result.dgps_age_seconds is None
        assert result.dgps_station_id is None
        assert result.valid is True

    def test_gga_no_fix(self):
        sentence = "$GNGGA,123519.00,,,,,0,00,,,,,,,*5B"
        result = gga.handle(sentence, COMBINED)
        assert result.latitude is None
        assert result.longitude is None
        assert result.fix_quality == 0
        assert result.num_satellites == 0
        assert result.horizontal_dilution_of_precision is None
        assert result.altitude_meters is None
        assert result.geoid_height_meters is None
        assert result.valid is False

    def test_gga_empty_fields_with_fix(self):
        sentence = "$GNGGA,123519.00,4807.038,N,01131.000,E,1,,,545.4,M,,M,,*4D"
        result = gga.handle(sentence, COMBINED)
        assert result.fix_quality == 1
        assert result.num_satellites is None and result.horizontal_dilution_of_precision is None
        assert result.altitude_meters == pytest.approx(545.4)

    def test_gga_southern_hemisphere(self):
        sentence = "$GPGGA,123519.00,3356.123,S,15112.456,W,2,10,0.8,100.0,M,20.0,M,,*65"
        result = gga.handle(sentence, NavigationSystem.GPS)
        assert result.latitude == pytest.approx(-33.93538333, rel=1e-4)
        assert result.longitude == pytest.approx(-151.20760, rel=1e-4)

    def test_gga_empty_fix_quality_stays_none(self):
        result = gga.handle("$GNGGA,123519.00,,,,,,,,,,,,,*6B", COMBINED)
        assert result.fix_quality is None
        assert result.valid is False

    def test_gga_high_precision_coordinates(self):
        sentence = "$GNGGA,123519.00,4807.03812345,N,01131.00098765,E,4,12,0.5,545.4,M,47.0,M,,*79"
        result = gga.handle(sentence, COMBINED)
        assert result.latitude == pytest.approx(48.11730208, rel=1e-6)
        assert result.longitude == pytest.approx(11.51668313, rel=1e-6)

    def test_zedf9p_gga_rtk_fixed_with_dgps(self):
        sentence = "$GNGGA,081836.00,3723.46587,N,12202.26957,W,4,12,0.7,10.5,M,-30.0,M,1.0,0000*51"
        result = gga.handle(sentence, COMBINED)
        assert result.fix_quality == 4
        assert result.geoid_height_meters == pytest.approx(-30.0)
        assert result.dgps_age_seconds == pytest.approx(1.0)
        assert result.dgps_station_id == 0

    def test_gga_truncated_after_altitude(self):
        result = gga.handle("GPGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4", COMBINED)
        assert result.altitude_meters == pytest.approx(545.4)
        assert result.geoid_height_meters is None

    def test_gga_unparsable_time_is_lenient(self):
        result = gga.handle("GPGGA,12:35:19,4807.038,N,01131.000,E,1", COMBINED)
        assert result.utc_time is None
        assert result.fix_quality == 1

    def test_gga_malformed_satellite_count_fails(self):
        with pytest.raises(MalformedFieldError) as exc_info:
            gga.handle("GPGGA,123519.00,4807.038,N,01131.000,E,1,8.5", COMBINED)
        assert exc_info.value.sentence_kind == "GGA"
        assert exc_info.value.field_index == 7

    def test_gga_bad_hemisphere_fails(self):
        with pytest.raises(InvalidEnumerationError):
            gga.handle("GPGGA,123519.00,4807.038,X,01131.000,E,1", COMBINED)
