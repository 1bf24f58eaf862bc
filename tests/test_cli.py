from raredonor.cli import main
from raredonor.loader import PLATE_SAMPLES, plate_location
from raredonor.sample import ANTIGENS


def line(din, **overrides):
    values = [overrides.get(name, "+") for name in ANTIGENS]
    return ";".join([din, *values])


def write_run(path, sample_lines):
    header = [f"header {n}" for n in range(8)]
    path.write_text("\n".join(header + sample_lines) + "\n", encoding="utf-8")


def test_main_reports_found_sample(tmp_path, capsys):
    run = tmp_path / "run.txt"
    write_run(run, [line(f"DIN{n}") for n in range(PLATE_SAMPLES - 1)] + [line("RARE", Jsb="0")])
    assert main([str(run)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Rare Donor Search\n\nU- and U variants\n")
    assert f"Jsb-\n{plate_location(PLATE_SAMPLES - 1 + 3)}  RARE\n" in out
    assert out.count("RARE") == 1


def test_main_missing_lines_are_u_variants(tmp_path, capsys):
    run = tmp_path / "run.txt"
    write_run(run, [line(f"DIN{n}") for n in range(PLATE_SAMPLES - 1)])
    assert main([str(run)]) == 0
    out = capsys.readouterr().out
    assert f"U- and U variants\n{plate_location(PLATE_SAMPLES - 1 + 3)}  \n" in out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    out = capsys.readouterr().out
    assert out == "Rare Donor Search\n\nError opening file \n"