import json

from quarter_ratio import config as settings
from quarter_ratio.main import main


def write_quarters(tmp_path, quarters):
    path = tmp_path / "quarters.json"
    path.write_text(json.dumps(quarters))
    return str(path)


def test_main_distributes_file(tmp_path, capsys):
    path = write_quarters(tmp_path, [{"value": 34}, {"value": 132}, {"value": 11}, {"value": 91}])

    code = main(["435", "--quarters", path, "--number-of-qtrs", "4", "--strategy", "ceil", "--no-save"])

    out = capsys.readouterr().out
    assert code == 0
    assert "DISTRIBUTION RESULTS" in out
    assert "Remainder Strategy: ceil" in out
    assert "Quarters add up to the total" in out


def test_main_without_file_uses_defaults(tmp_path, capsys, monkeypatch):
    monkeypatch.chdir(tmp_path)
    output = tmp_path / "results.json"

    code = main(["242", "--number-of-qtrs", "4", "--output", str(output)])

    assert code == 0
    record = json.loads(output.read_text())
    assert [q["value"] for q in record["quarters_after"]] == [61, 61, 60, 60]
    assert record["config"]["number_of_qtrs"] == 4
    assert list((tmp_path / "data" / "runs").iterdir())


def test_main_config_mismatch(capsys):
    code = main(["100", "--number-of-qtrs", "4", "--defaults", ".1,.1,.1,.1,.5", "--no-save"])

    assert code == 1
    assert "do not match" in capsys.readouterr().err


def test_main_missing_quarter_file(tmp_path, capsys):
    code = main(["100", "--quarters", str(tmp_path / "nope.json"), "--no-save"])

    assert code == 1
    assert "not found" in capsys.readouterr().err


def test_main_reads_default_quarters_file(tmp_path, capsys, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "data").mkdir()
    write_quarters(tmp_path / "data", [{"value": 34}, {"value": 132}, {"value": 11}, {"value": 91}])
    output = tmp_path / "results.json"

    code = main(["435", "--number-of-qtrs", "4", "--output", str(output)])

    assert code == 0
    assert "Loaded 4 quarters" in capsys.readouterr().out
    record = json.loads(output.read_text())
    assert [q["value"] for q in record["quarters_after"]] == [56, 215, 17, 147]


def test_main_bad_quarter_count_setting(monkeypatch, capsys):
    monkeypatch.setattr(settings, "NUMBER_OF_QTRS", "four")
    monkeypatch.setattr(settings, "QTR_DEFAULTS", "")

    code = main(["100", "--no-save"])

    assert code == 1
    assert "number_of_qtrs" in capsys.readouterr().err


def test_main_bad_default_ratios_setting(monkeypatch, capsys):
    monkeypatch.setattr(settings, "NUMBER_OF_QTRS", "2")
    monkeypatch.setattr(settings, "QTR_DEFAULTS", ".5,half")

    code = main(["100", "--no-save"])

    assert code == 1
    assert "qtr_defaults" in capsys.readouterr().err
