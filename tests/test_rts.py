# tests/test_rts.py

import math

import pytest

from sunspa.core.types import Atmosphere, Location, TimeInstant
from sunspa.engines.astro import rts
from sunspa.engines.astro.geocentric import SolarTerms


@pytest.fixture(scope="module")
def terms():
    return SolarTerms.build()


def test_standard_altitude():
    assert rts.standard_altitude(0.5667) == pytest.approx(-0.83337)
    assert rts.standard_altitude(0.0) == pytest.approx(-0.26667)


def test_hour_angle_at_rise_set():
    # equator, sun on the equator: ~90 deg plus the horizon dip
    h0 = rts.sun_hour_angle_at_rise_set(0.0, 0.0, -0.83337)
    assert h0 == pytest.approx(90.83337, abs=1e-4)
    assert rts.sun_hour_angle_at_rise_set(80.0, 20.0, -0.83337) == rts.NO_CROSSING
    assert rts.sun_hour_angle_at_rise_set(80.0, -20.0, -0.83337) == rts.NO_CROSSING


def test_three_point_interpolation():
    assert rts.interpolate_three_point((1.0, 2.0, 3.0), 0.0) == 2.0
    assert rts.interpolate_three_point((1.0, 2.0, 3.0), 0.5) == pytest.approx(2.5)
    # right ascension passing 360 -> 0: the jump folds back to the daily motion
    assert rts.interpolate_three_point((359.0, 359.99, 0.98), 0.5) == pytest.approx(359.99 + 0.99 * 0.5)


def test_sentinel_is_below_every_valid_hour():
    assert rts.NO_CROSSING < 0.0
    assert rts.NO_CROSSING == -99999.0


def test_polar_night_keeps_transit(terms):
    out = rts.rise_transit_set(
        TimeInstant(2024, 12, 21, 12, timezone=1.0), Location(69.65, 18.96), Atmosphere(), terms
    )
    assert out.state is rts.RtsState.NO_CROSSING
    assert not out.has_crossing
    assert out.sunrise == rts.NO_CROSSING and out.sunset == rts.NO_CROSSING
    assert out.srha == rts.NO_CROSSING and out.ssha == rts.NO_CROSSING
    # local solar noon in Tromso is close to 11:40 CET
    assert out.suntransit == pytest.approx(11.7, abs=0.1)
    assert out.sun_transit_alt == pytest.approx(90.0 - 69.65 - 23.44, abs=0.1)


def test_equator_day_length(terms):
    out = rts.rise_transit_set(
        TimeInstant(2024, 3, 20, 12), Location(0.0, 0.0), Atmosphere(), terms
    )
    assert out.has_crossing
    # ~12h plus about 7 minutes from refraction and the solar disk
    assert out.sunset - out.sunrise == pytest.approx(12.12, abs=0.03)
    assert out.sunrise < out.suntransit < out.sunset
    assert math.isfinite(out.sun_transit_alt)


def test_depends_only_on_date(terms):
    loc, atm = Location(39.742476, -105.1786, 1830.14), Atmosphere(820.0, 11.0)
    a = rts.rise_transit_set(TimeInstant(2003, 10, 17, 1, 0, timezone=-7.0), loc, atm, terms)
    b = rts.rise_transit_set(TimeInstant(2003, 10, 17, 23, 59, 59.0, timezone=-7.0), loc, atm, terms)
    assert a == b
