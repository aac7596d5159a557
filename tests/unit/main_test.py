import json

from typer.testing import CliRunner

from swarmgrid.main import app

runner = CliRunner()

MAP = "5 3\n.....\n.#B..\n.....\n"


class TestCli:
    def test_solve_from_stdin(self):
        result = runner.invoke(app, ["solve"], input=MAP)
        assert result.exit_code == 0
        assert result.stdout.splitlines() == [".zzz.", ".#Bz.", ".zzz."]

    def test_solve_file_with_report(self, tmp_path):
        map_file = tmp_path / "map.txt"
        map_file.write_text("3 3\n###\n#.#\n###\n")
        report_file = tmp_path / "report.json"
        result = runner.invoke(
            app,
            [
                "solve",
                str(map_file),
                "--sweep-order",
                "alternating",
                "--report",
                str(report_file),
            ],
        )
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["###", "#.#", "###"]
        report = json.loads(report_file.read_text())
        assert report["sweeps"] == 1
        assert report["state_counts"]["UNREACHABLE"] == 1
        assert report["state_counts"]["UNKNOWN"] == 0

    def test_config_file(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("double_buffer: true\n")
        result = runner.invoke(app, ["solve", "--config", str(config_file)], input=MAP)
        assert result.exit_code == 0

    def test_invalid_map(self):
        result = runner.invoke(app, ["solve"], input="2 2\n..\n.Q\n")
        assert result.exit_code == 1
        assert "line 3" in result.output

    def test_invalid_sweep_order(self):
        result = runner.invoke(app, ["solve", "--sweep-order", "diagonal"], input=MAP)
        assert result.exit_code != 0

    def test_alternating_sweep_order(self):
        ring = "5 5\n#####\n#...#\n#.#.#\n#...#\n##.##\n"
        result = runner.invoke(app, ["solve", "--sweep-order", "alternating"], input=ring)
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["#####", "#...#", "#.#.#", "#...#", "##.##"]

    def test_sweep_order_choices_checked_by_typer(self):
        result = runner.invoke(app, ["solve", "--sweep-order", "diagonal"], input=MAP)
        assert result.exit_code == 2
