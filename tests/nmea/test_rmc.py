"""Tests for RMC sentence decoding."""

from datetime import datetime, timezone

import pytest

from navsentence.nmea import rmc
from navsentence.nmea.errors import InvalidEnumerationError, MalformedFieldError
from navsentence.nmea.types import FaaMode, NavigationSystem, RmcData

GPS = NavigationSystem.GPS

SCENARIO_A = "$GPRMC,225446,A,4916.45,N,12311.12,W,000.5,054.7,191120,020.3,E*67"
SCENARIO_B = "$GPRMC,225446,A,,,,,,,070809,,*23"


def _with_field(index: int, value: str) -> str:
    """Return SCENARIO_A's body with one field replaced."""
    fields = SCENARIO_A[1 : SCENARIO_A.index("*")].split(",")
    fields[index] = value
    return ",".join(fields)


class TestHandleRMC:
    """Tests for the RMC handle function."""

    def test_full_sentence(self):
        result = rmc.handle(SCENARIO_A, GPS)
        assert isinstance(result, RmcData)
        assert result.source is GPS
        assert result.status_active is True
        assert result.timestamp == datetime(2020, 11, 19, 22, 54, 46, tzinfo=timezone.utc)
        assert result.latitude == pytest.approx(49.2741667, rel=1e-6)
        assert result.longitude == pytest.approx(-123.1853333, rel=1e-6)
        assert result.sog_knots == 0.5
        assert result.bearing == pytest.approx(54.7, abs=0.1)
        assert result.variation == 20.3
        assert result.mode is None

    def test_empty_fields(self):
        result = rmc.handle(SCENARIO_B, GPS)
        assert result.status_active is True
        assert result.timestamp == datetime(2009, 8, 7, 22, 54, 46, tzinfo=timezone.utc)
        assert result.latitude is None
        assert result.longitude is None
        assert result.sog_knots is None
        assert result.bearing is None
        assert result.variation is None

    def test_source_is_passed_through(self):
        assert rmc.handle(SCENARIO_B, NavigationSystem.GALILEO).source is NavigationSystem.GALILEO

    @pytest.mark.parametrize(
        ("letter", "expected"),
        [("A", True), ("D", True), ("V", False), ("", None)],
    )
    def test_status_letters(self, letter, expected):
        assert rmc.handle(_with_field(2, letter), GPS).status_active is expected

    @pytest.mark.parametrize("letter", ["X", "a", "AV", "1"])
    def test_invalid_status_fails(self, letter):
        with pytest.raises(InvalidEnumerationError) as exc_info:
            rmc.handle(_with_field(2, letter), GPS)
        assert exc_info.value.sentence_kind == "RMC"
        assert exc_info.value.value == letter

    def test_east_variation_is_positive(self):
        assert rmc.handle(_with_field(11, "E"), GPS).variation == 20.3

    def test_west_variation_is_negative(self):
        assert rmc.handle(_with_field(11, "W"), GPS).variation == -20.3

    def test_empty_variation_ignores_side(self):
        assert rmc.handle(_with_field(10, ""), GPS).variation is None

    @pytest.mark.parametrize("side", ["N", "", "X"])
    def test_invalid_variation_side_fails(self, side):
        with pytest.raises(InvalidEnumerationError, match="variation side"):
            rmc.handle(_with_field(11, side), GPS)

    def test_variation_side_missing_from_truncated_sentence_fails(self):
        with pytest.raises(InvalidEnumerationError):
            rmc.handle("GPRMC,225446,A,,,,,,,191120,020.3", GPS)

    def test_malformed_speed_fails(self):
        with pytest.raises(MalformedFieldError) as exc_info:
            rmc.handle(_with_field(7, "fast"), GPS)
        assert exc_info.value.field_index == 7

    @pytest.mark.parametrize(("index", "value"), [(7, "nan"), (7, "1_0"), (8, " 5"), (10, "inf")])
    def test_python_only_numerals_fail(self, index, value):
        with pytest.raises(MalformedFieldError) as exc_info:
            rmc.handle(_with_field(index, value), GPS)
        assert exc_info.value.field_index == index

    def test_bad_latitude_names_its_field(self):
        with pytest.raises(MalformedFieldError) as exc_info:
            rmc.handle(_with_field(3, "49x6.45"), GPS)
        assert exc_info.value.field_index == 3

    def test_bad_longitude_hemisphere_names_its_field(self):
        with pytest.raises(InvalidEnumerationError) as exc_info:
            rmc.handle(_with_field(6, "Q"), GPS)
        assert exc_info.value.field_index == 6

    def test_malformed_track_fails(self):
        with pytest.raises(MalformedFieldError):
            rmc.handle(_with_field(8, "054;7"), GPS)

    def test_malformed_variation_fails(self):
        with pytest.raises(MalformedFieldError):
            rmc.handle(_with_field(10, "20.3E"), GPS)

    def test_bad_latitude_hemisphere_fails(self):
        with pytest.raises(InvalidEnumerationError):
            rmc.handle(_with_field(4, "W"), GPS)

    def test_bad_longitude_hemisphere_fails(self):
        with pytest.raises(InvalidEnumerationError):
            rmc.handle(_with_field(6, "S"), GPS)

    def test_southern_eastern_position(self):
        sentence = "GPRMC,081836,A,3751.65,S,14507.36,E,000.0,360.0,130925,011.3,E"
        result = rmc.handle(sentence, GPS)
        assert result.latitude == pytest.approx(-37.8608333, rel=1e-6)
        assert result.longitude == pytest.approx(145.1226667, rel=1e-6)
        assert result.sog_knots == 0.0
        assert result.timestamp == datetime(2025, 9, 13, 8, 18, 36, tzinfo=timezone.utc)

    def test_invalid_date_is_lenient(self):
        result = rmc.handle(_with_field(9, "321399"), GPS)
        assert result.timestamp is None
        assert result.status_active is True
        assert result.sog_knots == 0.5

    def test_missing_time_is_lenient(self):
        assert rmc.handle(_with_field(1, ""), GPS).timestamp is None

    def test_mode_indicator(self):
        result = rmc.handle(SCENARIO_A[: SCENARIO_A.index("*")] + ",D", GPS)
        assert result.mode is FaaMode.DIFFERENTIAL

    def test_invalid_mode_indicator_fails(self):
        with pytest.raises(InvalidEnumerationError, match="mode indicator"):
            rmc.handle(SCENARIO_A[: SCENARIO_A.index("*")] + ",Z", GPS)

    def test_truncated_sentence_equals_empty_fields(self):
        truncated = rmc.handle("GPRMC,225446,A", GPS)
        padded = rmc.handle("GPRMC,225446,A,,,,,,,,,,", GPS)
        assert truncated == padded
        assert truncated.timestamp is None
        assert truncated.status_active is True
        assert truncated.variation is None

    def test_only_type_field(self):
        result = rmc.handle("$GPRMC", GPS)
        assert result == RmcData(
            source=GPS,
            timestamp=None,
            status_active=None,
            latitude=None,
            longitude=None,
            sog_knots=None,
            bearing=None,
            variation=None,
        )

    def test_decoding_is_pure(self):
        assert rmc.handle(SCENARIO_A, GPS) == rmc.handle(SCENARIO_A, GPS)

    def test_record_is_immutable(self):
        result = rmc.handle(SCENARIO_A, GPS)
        with pytest.raises(AttributeError):
            result.sog_knots = 1.0  # type: ignore[misc]
