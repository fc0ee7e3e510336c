# tests/test_validate.py

import math
from dataclasses import replace

import pytest

from sunspa.core.types import Atmosphere, FunctionCode, Location, SpaResult, Surface, TimeInstant
from sunspa.core.validate import ErrorCode, validate_inputs
from sunspa.engines.spa import SpaEngine

T = TimeInstant(2003, 10, 17, 12, 30, 30.0, timezone=-7.0, delta_ut1=0.0, delta_t=67.0)
LOC = Location(39.742476, -105.1786, 1830.14)
ATM = Atmosphere(820.0, 11.0, 0.5667)
SURF = Surface(30.0, -10.0)


def _check(t=T, loc=LOC, atm=ATM, surf=SURF, fc=FunctionCode.ALL):
    return validate_inputs(t, loc, atm, surf, fc)


def test_valid_inputs():
    assert _check() == ErrorCode.OK


@pytest.mark.parametrize("field, value, code", [
    ("year", -2001, ErrorCode.YEAR),
    ("year", 6001, ErrorCode.YEAR),
    ("month", 0, ErrorCode.MONTH),
    ("month", 13, ErrorCode.MONTH),
    ("day", 0, ErrorCode.DAY),
    ("day", 32, ErrorCode.DAY),
    ("hour", -1, ErrorCode.HOUR),
    ("hour", 25, ErrorCode.HOUR),
    ("minute", 60, ErrorCode.MINUTE),
    ("minute", -1, ErrorCode.MINUTE),
    ("second", 60.0, ErrorCode.SECOND),
    ("second", -0.001, ErrorCode.SECOND),
    ("second", math.nan, ErrorCode.SECOND),
    ("delta_ut1", 1.0, ErrorCode.DELTA_UT1),
    ("delta_ut1", -1.0, ErrorCode.DELTA_UT1),
    ("delta_t", 8000.5, ErrorCode.DELTA_T),
    ("delta_t", math.inf, ErrorCode.DELTA_T),
    ("timezone", 18.5, ErrorCode.TIMEZONE),
    ("timezone", -19.0, ErrorCode.TIMEZONE),
])
def test_time_field_codes(field, value, code):
    assert _check(t=replace(T, **{field: value})) == code


@pytest.mark.parametrize("field, value, code", [
    ("latitude", 90.1, ErrorCode.LATITUDE),
    ("latitude", math.nan, ErrorCode.LATITUDE),
    ("longitude", -180.5, ErrorCode.LONGITUDE),
    ("elevation", -6500001.0, ErrorCode.ELEVATION),
    ("elevation", math.nan, ErrorCode.ELEVATION),
])
def test_location_field_codes(field, value, code):
    assert _check(loc=replace(LOC, **{field: value})) == code


@pytest.mark.parametrize("field, value, code", [
    ("pressure", -1.0, ErrorCode.PRESSURE),
    ("pressure", 5000.1, ErrorCode.PRESSURE),
    ("temperature", -273.0, ErrorCode.TEMPERATURE),
    ("temperature", 6000.5, ErrorCode.TEMPERATURE),
    ("atmos_refract", 5.5, ErrorCode.ATMOS_REFRACT),
])
def test_atmosphere_field_codes(field, value, code):
    assert _check(atm=replace(ATM, **{field: value})) == code


def test_bounds_are_inclusive_where_documented():
    assert _check(t=replace(T, year=-2000)) == ErrorCode.OK
    assert _check(t=replace(T, year=6000)) == ErrorCode.OK
    assert _check(t=replace(T, timezone=18.0)) == ErrorCode.OK
    assert _check(t=replace(T, delta_t=-8000.0)) == ErrorCode.OK
    assert _check(t=replace(T, second=59.999)) == ErrorCode.OK
    assert _check(loc=replace(LOC, latitude=-90.0, longitude=180.0)) == ErrorCode.OK
    assert _check(atm=replace(ATM, pressure=0.0, temperature=6000.0)) == ErrorCode.OK


def test_hour_24():
    assert _check(t=replace(T, hour=24, minute=0, second=0.0)) == ErrorCode.OK
    assert _check(t=replace(T, hour=24, minute=1, second=0.0)) == ErrorCode.MINUTE
    assert _check(t=replace(T, hour=24, minute=0, second=0.5)) == ErrorCode.SECOND


def test_surface_checked_only_when_incidence_requested():
    surf = Surface(slope=400.0, azm_rotation=0.0)
    assert _check(surf=surf, fc=FunctionCode.ZA) == ErrorCode.OK
    assert _check(surf=surf, fc=FunctionCode.ZA_RTS) == ErrorCode.OK
    assert _check(surf=surf, fc=FunctionCode.ZA_INC) == ErrorCode.SLOPE
    assert _check(surf=surf, fc=FunctionCode.ALL) == ErrorCode.SLOPE
    assert _check(surf=Surface(0.0, -361.0), fc=FunctionCode.ALL) == ErrorCode.AZM_ROTATION


def test_first_violation_wins():
    # year before month
    assert _check(t=replace(T, year=7000, month=13)) == ErrorCode.YEAR
    # pressure and temperature are checked before delta_t and the location
    bad_t = replace(T, delta_t=9000.0)
    assert _check(t=bad_t, atm=replace(ATM, pressure=6000.0)) == ErrorCode.PRESSURE
    assert _check(t=replace(T, delta_ut1=2.0, delta_t=9000.0)) == ErrorCode.DELTA_UT1
    # delta_t before timezone before longitude before latitude
    assert _check(t=replace(bad_t, timezone=20.0)) == ErrorCode.DELTA_T
    assert _check(t=replace(T, timezone=20.0), loc=Location(100.0, 200.0)) == ErrorCode.TIMEZONE
    assert _check(loc=Location(100.0, 200.0)) == ErrorCode.LONGITUDE
    # elevation after atmos_refract, slope last
    assert _check(loc=replace(LOC, elevation=-7e6), atm=replace(ATM, atmos_refract=9.0)) == ErrorCode.ATMOS_REFRACT
    assert _check(loc=replace(LOC, elevation=-7e6), surf=Surface(400.0, 0.0)) == ErrorCode.ELEVATION


def test_error_code_fields():
    assert ErrorCode.AZM_ROTATION.field == "azm_rotation"
    assert ErrorCode.DELTA_UT1.field == "delta_ut1"
    assert int(ErrorCode.DELTA_UT1) == 17


def test_compute_reports_code_with_zeroed_result():
    eng = SpaEngine.build()
    r = eng.compute(replace(T, month=13), LOC, ATM, SURF)
    assert r == SpaResult.failed(ErrorCode.MONTH)
    assert r.error_code == 2
    assert r.zenith == 0.0 and r.sunrise == 0.0


def test_compute_accepts_plain_int_function_code():
    eng = SpaEngine.build()
    assert eng.compute(T, LOC, ATM, SURF, 0) == eng.compute(T, LOC, ATM, SURF, FunctionCode.ZA)


@pytest.mark.parametrize("fc", [7, -1])
def test_compute_rejects_unknown_function_code(fc):
    with pytest.raises(TypeError, match="unknown function code"):
        SpaEngine.build().compute(T, LOC, ATM, SURF, fc)
