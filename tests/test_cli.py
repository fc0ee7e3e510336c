# tests/test_cli.py

import pytest

from sunspa import api
from sunspa.cli import main

NREL_ARGS = [
    "2003-10-17", "12:30:30",
    "--lat", "39.742476", "--lon", "-105.1786", "--tz", "-7",
    "--elevation", "1830.14", "--pressure", "820", "--temperature", "11",
    "--slope", "30", "--azm-rotation", "-10",
]


@pytest.fixture(autouse=True)
def fresh_engine():
    api.reset()
    yield
    api.reset()


def test_position(capsys):
    assert main(["position"] + NREL_ARGS) == 0
    out = capsys.readouterr().out
    assert "Zenith             = 50.1116" in out
    assert "Azimuth            = 194.3402" in out
    assert "Incidence          = 25.18" in out
    assert "06:12:43" in out
    assert "17:20:19" in out


def test_position_shorthand(capsys):
    assert main(NREL_ARGS) == 0
    assert "06:12:43" in capsys.readouterr().out


def test_position_auto_delta_t(capsys):
    assert main(["position"] + NREL_ARGS + ["--delta-t", "auto", "--function", "za"]) == 0
    out = capsys.readouterr().out
    assert "delta_t=64." in out
    assert "N/A" not in out


def test_position_out_of_range(capsys):
    assert main(["position", "2003-10-17", "12:30", "--lat", "40", "--lon", "-74", "--tz", "30"]) == 2
    assert "timezone out of range (error code 8)" in capsys.readouterr().err


def test_position_polar_night(capsys):
    assert main(["position", "2024-12-21", "12:00", "--lat", "69.65", "--lon", "18.96", "--tz", "1"]) == 0
    out = capsys.readouterr().out
    assert "Sunrise            = N/A" in out
    assert "Sunset             = N/A" in out


def test_astro_args(capsys):
    assert main(["astro-args", "--jd", "2452930.312847", "--delta-t", "67"]) == 0
    out = capsys.readouterr().out
    assert "L      = 24.01826" in out
    assert "alpha  = 202.2274" in out
    assert "delta  = -9.3143" in out


def test_verbose_flag(capsys):
    assert main(["-v", "astro-args"]) == 0
    assert "JD   = 2451545.000000" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [
    ["position", "-500-06-21", "12:00", "--lat", "40", "--lon", "0"],
    ["-500-06-21", "12:00", "--lat", "40", "--lon", "0"],
    ["position", "--date", "-500-06-21", "12:00", "--lat", "40", "--lon", "0"],
])
def test_position_negative_year(argv, capsys):
    assert main(argv) == 0
    out = capsys.readouterr().out
    assert "-500-06-21 12:00" in out
    assert "Sunrise            = N/A" not in out


def test_position_date_given_twice():
    with pytest.raises(SystemExit) as exc:
        main(["position", "2003-10-17", "12:00", "--date", "2003-10-18", "--lat", "40", "--lon", "0"])
    assert exc.value.code == 2


@pytest.mark.parametrize("bad", [
    ["--delta-t", "soon"],
    ["--date", "2003/10/17"],
])
def test_position_malformed_values(bad, capsys):
    argv = ["position", "12:00", "--lat", "40", "--lon", "0"] + bad
    if bad[0] == "--delta-t":
        argv.insert(1, "2003-10-17")
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2
    assert "expected" in capsys.readouterr().err
