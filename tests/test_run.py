"""End-to-end tests for the command-line runner."""
import pytest

from orgaudit import run

PROPERTIES = (
    "app.hierarchy.depth=4\n"
    "app.salary.ration.low=1.2\n"
    "app.salary.ration.high=1.5\n"
)


@pytest.fixture
def properties(tmp_path):
    path = tmp_path / "application.properties"
    path.write_text(PROPERTIES)
    return path


class TestMain:
    def test_reports_sample_findings(self, roster_csv, properties, capsys):
        exit_code = run.main(["--config", str(properties), "--report", str(roster_csv)])

        out = capsys.readouterr().out.splitlines()
        assert exit_code == 0
        assert out == [
            "Manager Joe Doe (id=123) earns more than they should by 1000.0",
            "Manager Martin Chekov (id=124) earns less than they should by 15000.0",
        ]

    def test_legacy_report_argument(self, roster_csv, properties, capsys):
        exit_code = run.main(["--config", str(properties), f"--app.report.path={roster_csv}"])
        assert exit_code == 0
        assert "Joe Doe" in capsys.readouterr().out

    def test_report_path_from_config(self, roster_csv, tmp_path, capsys):
        config = tmp_path / "with_path.properties"
        config.write_text(PROPERTIES + f"app.report.path={roster_csv}\n")
        assert run.main(["--config", str(config), "--parallel"]) == 0
        assert "Martin Chekov" in capsys.readouterr().out

    def test_missing_report_path(self, properties, capsys):
        assert run.main(["--config", str(properties)]) == 1
        assert "Path to report is not specified" in capsys.readouterr().err

    def test_bad_configuration_fails_before_analysis(self, roster_csv, tmp_path, capsys):
        config = tmp_path / "bad.properties"
        config.write_text("app.hierarchy.depth=4\napp.salary.ration.low=1.2\n")
        assert run.main(["--config", str(config), "--report", str(roster_csv)]) == 1
        captured = capsys.readouterr()
        assert "app.salary.ration.high" in captured.err
        assert captured.out == ""

    def test_malformed_config_file(self, roster_csv, tmp_path, capsys):
        config = tmp_path / "broken.toml"
        config.write_text("hierarchy_depth_threshold = = 4\n")
        assert run.main(["--config", str(config), "--report", str(roster_csv)]) == 1
        assert "Could not parse" in capsys.readouterr().err

    def test_cyclic_roster(self, tmp_path, properties, capsys):
        roster = tmp_path / "cycle.csv"
        roster.write_text("id,firstName,lastName,salary,managerId\n1,A,A,10,2\n2,B,B,10,1\n")
        assert run.main(["--config", str(properties), "--report", str(roster)]) == 1
        assert "Cyclic reporting line" in capsys.readouterr().err

    def test_validate_only(self, roster_csv, properties, capsys):
        assert run.main(["--config", str(properties), "--report", str(roster_csv), "--validate"]) == 0
        assert "Validation Results" in capsys.readouterr().out

    def test_validate_malformed(self, tmp_path, properties):
        roster = tmp_path / "bad.csv"
        roster.write_text("id,firstName,lastName,salary,managerId\nx,A,A,10\n")
        assert run.main(["--config", str(properties), "--report", str(roster), "--validate"]) == 1
