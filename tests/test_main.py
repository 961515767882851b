import json

from test_fileio import SAMPLE, SAMPLE_REPORT

from chefdispatch.main import main


def test_cli_writes_report_and_exports(tmp_path):
    src = tmp_path / "input.txt"
    src.write_text(SAMPLE, encoding="utf-8")
    report = tmp_path / "output.txt"
    outputs = tmp_path / "outputs"
    code = main(["--input", str(src), "--report", str(report), "--outputs", str(outputs), "--plots"])
    assert code == 0
    assert report.read_text(encoding="utf-8") == SAMPLE_REPORT
    assert (outputs / "orders.csv").exists()
    assert (outputs / "wait_by_class.png").exists()
    assert (outputs / "gantt.png").exists()
    summary = json.loads((outputs / "summary.json").read_text(encoding="utf-8"))
    assert summary[0]["total_orders"] == 8


def test_cli_generated_scenario(tmp_path):
    report = tmp_path / "output.txt"
    code = main(["--scenario", "bursty", "--report", str(report), "--outputs", str(tmp_path / "out")])
    assert code == 0
    assert report.read_text(encoding="utf-8").startswith("FT ID RT WT ST\n")


def test_cli_reports_invalid_input(tmp_path):
    src = tmp_path / "input.txt"
    src.write_text("1 0 0\n0 1 1\n1\nN 0 1 5 0\n", encoding="utf-8")
    code = main(["--input", str(src), "--report", str(tmp_path / "o.txt"), "--outputs", str(tmp_path / "out")])
    assert code == 1
    assert not (tmp_path / "o.txt").exists()


def test_cli_rejects_fractional_chef_count(tmp_path):
    report = tmp_path / "output.txt"
    code = main(["--scenario", "uniform", "--normal", "1.9", "1", "--report", str(report),
                 "--outputs", str(tmp_path / "out")])
    assert code == 1
    assert not report.exists()


def test_cli_accepts_integer_chef_count_with_fractional_speed(tmp_path):
    report = tmp_path / "output.txt"
    code = main(["--scenario", "uniform", "--normal", "3", "1.5", "--report", str(report),
                 "--outputs", str(tmp_path / "out")])
    assert code == 0
    assert "Chefs: Normal=3 Vegan=1 VIP=1" in report.read_text(encoding="utf-8")
