"""
Tests for the command line entry point.
"""

import io
import json
from contextlib import redirect_stdout
from datetime import date
from unittest.mock import patch

from calendar_heatmap.main import create_parser, main


def _run(argv):
    output = io.StringIO()
    with redirect_stdout(output):
        code = main(argv)
    return code, output.getvalue()


class TestCreateParser:
    """Tests for argument parsing."""

    def test_defaults(self):
        args = create_parser().parse_args(["2025-02"])

        assert args.start == "2025-02"
        assert args.end is None
        assert args.week_start == "sun"
        assert args.month == 0
        assert args.lang == "en"
        assert args.serve is False


class TestMain:
    """Tests for main()."""

    def test_prints_heatmap_from_data_file(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text(json.dumps([{"date": "2025-02-10", "value": 100}]))

        code, output = _run(["2025-02", "--end", "2025-02", "--data", str(path), "--week-start", "mon", "--list"])

        assert code == 0
        assert "2025/02" in output
        assert output.index("Mon") < output.index("Sun")
        assert "2025-02-10" in output

    def test_demo_data_when_no_file(self):
        code, output = _run(["2025-01", "--end", "2025-03", "--month", "2"])

        assert code == 0
        assert "▶ [ 2] 2025/03" in output

    @patch("calendar_heatmap.main.generate_demo_data", return_value=[])
    def test_demo_data_runs_to_current_month_without_end(self, mock_generate):
        code, _ = _run(["2025-01"])

        assert code == 0
        assert mock_generate.call_args.args[1] == date.today().strftime("%Y-%m")

    def test_invalid_end_shows_start_month_only(self):
        code, output = _run(["2025-02", "--end", "bogus"])

        assert code == 0
        assert "2025/02" in output
        assert "Error:" not in output

    def test_invalid_start_returns_error(self):
        code, output = _run(["January", "--end", "2025-02"])

        assert code == 1
        assert "Error:" in output

    def test_invalid_data_file_returns_error(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text("not json")

        code, output = _run(["2025-02", "--end", "2025-02", "--data", str(path)])

        assert code == 1
        assert "Could not read data file" in output

    @patch("calendar_heatmap.main.validate_config")
    def test_configuration_error(self, mock_validate):
        mock_validate.side_effect = ValueError("Invalid configuration: HEATMAP_DEMO_SEED='x'")

        code, output = _run(["2025-02"])

        assert code == 1
        assert "Configuration Error" in output

    @patch("calendar_heatmap.main.serve")
    def test_serve_flag_starts_server(self, mock_serve):
        mock_serve.return_value = 0

        code, _ = _run(["2025-02", "--serve", "--port", "9000"])

        assert code == 0
        mock_serve.assert_called_once_with("127.0.0.1", 9000)
