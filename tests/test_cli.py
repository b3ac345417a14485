# Copyright (c) 2026 orbitglobe contributors. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the orbitglobe command line."""
import logging

import pytest

from orbitglobe.cli import logger, main


@pytest.fixture(autouse=True)
def _detach_cli_handlers():
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


class TestFormat:

    def test_deg_min_sec(self, capsys):
        main(["format", "37.7749", "-122.4194"])
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "37°46'29\" N  122°25'09\" W"
        assert lines[1] == "37°46'29\" N"
        assert lines[2] == "122°25'09\" W"

    def test_deg_min(self, capsys):
        main(["format", "37.7749", "-122.4194", "--no-seconds"])
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "37°46' N  122°25' W"


class TestSubsolar:

    def test_fixed_instant(self, capsys):
        main(["subsolar", "--at", "2025-01-01T00:00:00Z"])
        out = capsys.readouterr().out
        assert "2025-01-01T00:00:00+00:00" in out
        line = next(l for l in out.splitlines() if l.startswith("Subsolar point:"))
        lat_text, lon_text = line.split(":", 1)[1].split(",")
        assert float(lat_text) == pytest.approx(-23.0, abs=0.05)
        assert float(lon_text) == pytest.approx(-179.14, abs=0.05)
        assert "Sun position:" in out

    def test_now(self, capsys):
        main(["subsolar"])
        assert "Subsolar point:" in capsys.readouterr().out

    def test_verbose_logs_julian_date(self, caplog, capsys):
        with caplog.at_level(logging.DEBUG, logger="orbitglobe"):
            main(["-v", "subsolar", "--at", "2025-01-01T00:00:00Z"])
        assert "Julian date 2460676.5" in caplog.text

    @pytest.mark.parametrize("text", ["yesterday", "2025-01-01T00:00:00"])
    def test_bad_instant(self, text, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["subsolar", "--at", text])
        assert exc.value.code == 1
        assert capsys.readouterr().err.startswith("Error:")


class TestOrbit:

    def test_known(self, capsys):
        main(["orbit", "iss", "23.5", "-41.2", "--heading", "-1"])
        out = capsys.readouterr().out
        assert "Satellite:   iss" in out
        assert "Inclination: -" in out
        assert "Transform:" in out

    def test_unknown(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["orbit", "mir", "10", "10"])
        assert exc.value.code == 1
        assert "Unknown satellite: mir" in capsys.readouterr().err

    def test_bad_heading(self):
        with pytest.raises(SystemExit) as exc:
            main(["orbit", "iss", "10", "10", "--heading", "2"])
        assert exc.value.code == 2


class TestMisc:

    def test_satellites(self, capsys):
        main(["satellites"])
        out = capsys.readouterr().out
        for text in ("ISS", "Tiangong", "Hubble", "25544", "27,540"):
            assert text in out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
        assert capsys.readouterr().out.startswith("orbitglobe ")

    def test_no_command(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 1
        assert "usage:" in capsys.readouterr().out
