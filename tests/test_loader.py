import pytest

from raredonor.loader import (
    HEADER_LINES,
    PLATE_SAMPLES,
    load_samples,
    plate_location,
    read_samples,
)
from raredonor.sample import ANTIGENS


def _sample_line(din, u="+"):
    values = [u if name == "U" else "+" for name in ANTIGENS]
    return ";".join([din, *values])


def _export(count):
    header = [f"header {i}" for i in range(HEADER_LINES)]
    body = [_sample_line(f"W{i:04d}") for i in range(count)]
    return header + body


def test_plate_location_first_wells():
    assert plate_location(0) == "A1"
    assert plate_location(3) == "D1"
    assert plate_location(8) == "A2"


def test_plate_location_last_well():
    assert plate_location(95) == "H12"


def test_plate_locations_are_unique_over_a_plate():
    wells = [plate_location(i) for i in range(96)]
    assert len(set(wells)) == 96
    assert all(w[0] in "ABCDEFGH" for w in wells)


def test_plate_location_negative_raises():
    with pytest.raises(ValueError):
        plate_location(-1)


def test_read_samples_skips_header():
    samples = read_samples(_export(PLATE_SAMPLES))
    assert len(samples) == PLATE_SAMPLES
    assert samples[0].din == "W0000"
    assert samples[-1].din == f"W{PLATE_SAMPLES - 1:04d}"


def test_read_samples_ignores_lines_after_plate():
    samples = read_samples(_export(PLATE_SAMPLES + 5))
    assert len(samples) == PLATE_SAMPLES
    assert samples[-1].din == f"W{PLATE_SAMPLES - 1:04d}"


def test_read_samples_pads_short_input_with_empty_samples():
    samples = read_samples(_export(2))
    assert len(samples) == PLATE_SAMPLES
    assert [s.din for s in samples[:2]] == ["W0000", "W0001"]
    assert all(s.din == "" for s in samples[2:])


def test_read_samples_accepts_newline_terminated_lines():
    lines = [line + "\n" for line in _export(1)]
    samples = read_samples(lines)
    assert samples[0]["Lub"] == "+"


def test_load_samples_from_file(tmp_path):
    path = tmp_path / "run.txt"
    lines = _export(3)
    lines[HEADER_LINES + 1] = _sample_line("W0001", u="0")
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    samples = load_samples(path)
    assert len(samples) == PLATE_SAMPLES
    assert samples[1]["U"] == "0"
    assert samples[0]["U"] == "+"
    assert samples[3].din == ""


def test_load_samples_handles_crlf(tmp_path):
    path = tmp_path / "run.txt"
    path.write_bytes(("\r\n".join(_export(1)) + "\r\n").encode("utf-8"))
    samples = load_samples(path)
    assert samples[0]["Lub"] == "+"


def test_load_samples_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_samples(tmp_path / "missing.txt")