"""
Tests for the survey report example script.

Runs examples/survey_report.py end to end through main() and checks the
answers it builds from command-line flags.
"""

import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "examples"))

from survey_report import build_answers, build_parser, main

from src.footprint import SurveyAnswers, is_balanced


def _answers_from_flags(*flags):
    return build_answers(build_parser().parse_args(list(flags)))


class TestBuildAnswers:
    """Test how flags turn into survey answers."""

    def test_modes_and_share_give_balanced_split(self):
        answers = _answers_from_flags(
            "--mode", "car", "--mode", "bus", "--mode", "walk", "--share", "car=60"
        )
        transport = answers.transport

        assert transport.selected_modes == ("car", "bus", "walk")
        assert transport.mode_distribution["car"] == pytest.approx(60)
        assert is_balanced(transport.mode_distribution, transport.selected_modes)

    def test_solar_zero_disables(self):
        answers = _answers_from_flags("--solar", "0")
        assert answers.solar.enabled is False
        assert answers.solar.percentage == 0.0

    def test_solar_percentage_enables(self):
        answers = _answers_from_flags("--solar", "45")
        assert answers.solar.enabled is True
        assert answers.solar.percentage == 45

    def test_share_for_unselected_mode_rejected(self):
        with pytest.raises(ValueError, match="'bus' is not selected"):
            _answers_from_flags("--mode", "car", "--share", "bus=40")

    def test_home_and_shopping_overrides(self):
        answers = _answers_from_flags(
            "--home", "villa", "--occupants", "2", "--shopping", "local", "--reusable-bags"
        )
        assert answers.home.type == "villa"
        assert answers.home.occupants == 2
        assert answers.shopping.source == "local"
        assert answers.shopping.reusable_bags is True

    def test_loads_saved_answers(self, tmp_path, heavy_answers):
        path = tmp_path / "answers.json"
        path.write_text(json.dumps(heavy_answers.to_dict()), encoding="utf-8")

        assert _answers_from_flags("--answers", str(path)) == heavy_answers


class TestMain:
    """Test the script entry point."""

    def test_json_output_round_trips(self, capsys):
        assert main(["--mode", "train", "--mode", "walk", "--daily-km", "25", "--json"]) == 0

        data = json.loads(capsys.readouterr().out)
        answers = SurveyAnswers.from_dict(data["answers"])

        assert answers.transport.selected_modes == ("train", "walk")
        assert answers.transport.mode_distribution == {"train": 50, "walk": 50}
        assert data["results"]["tiers"]["transport"] == "MEDIUM"

    def test_text_report_shows_emission_factors(self, capsys):
        assert main(["--mode", "car", "--mode", "bus"]) == 0

        out = capsys.readouterr().out
        assert "Carbon Footprint Results" in out
        assert "Private Car - Solo" in out
        assert "0.25 kg/km" in out
        assert "0.08 kg/km" in out

    def test_save_writes_answers(self, tmp_path, capsys):
        path = tmp_path / "saved.json"
        assert main(["--cooling", "fan", "--save", str(path)]) == 0

        saved = SurveyAnswers.from_dict(json.loads(path.read_text(encoding="utf-8")))
        assert saved.cooling.type == "fan"

    @pytest.mark.parametrize("share", ["car", "car=lots"])
    def test_bad_share_value_exits_with_usage_error(self, capsys, share):
        with pytest.raises(SystemExit) as exc_info:
            main(["--mode", "car", "--share", share])

        assert exc_info.value.code == 2
        assert "--share" in capsys.readouterr().err

    def test_unselected_share_exits_with_usage_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--mode", "car", "--share", "walk=30"])

        assert exc_info.value.code == 2
        assert "not selected" in capsys.readouterr().err

    def test_malformed_answers_file_exits_with_usage_error(self, tmp_path, capsys):
        path = tmp_path / "answers.json"
        path.write_text(json.dumps({"transport": None}), encoding="utf-8")

        with pytest.raises(SystemExit) as exc_info:
            main(["--answers", str(path)])

        assert exc_info.value.code == 2
        assert "'transport'" in capsys.readouterr().err
