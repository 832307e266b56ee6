import json

import pytest

from tick_direction.cli import main
from tick_direction.config import PipelineConfig
from tick_direction.data.parser import FallbackPolicy


RAW = {
    "Meta Data": {"2. Symbol": "IBM"},
    "Time Series (1min)": {
        "2024-01-02 09:31:00": {"1. open": "100.0", "5. volume": "10"},
        "2024-01-02 09:32:00": {"1. open": "101.0", "5. volume": "12"},
        "2024-01-02 09:33:00": {"1. open": "99.0", "5. volume": "8"},
        "2024-01-02 09:34:00": {"1. open": "102.0", "5. volume": "20"},
    },
}


class TestPipelineConfig:
    def test_defaults_validate(self):
        cfg = PipelineConfig()
        cfg.validate()
        assert cfg.series_key == "Time Series (1min)"
        assert cfg.fallback_policy is FallbackPolicy.DEFAULT

    @pytest.mark.parametrize(
        "kwargs",
        [{"symbol": " "}, {"interval": "3min"}, {"var_smoothing": 0.0}, {"min_length": 1}],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            PipelineConfig(**kwargs).validate()

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("ALPHAVANTAGE_API_KEY", "secret")
        monkeypatch.setenv("TICK_DIRECTION_SYMBOL", "MSFT")
        cfg = PipelineConfig.from_env(interval="5min", symbol=None)

        assert cfg.api_key == "secret"
        assert cfg.symbol == "MSFT"
        assert cfg.series_key == "Time Series (5min)"

    def test_from_env_without_variables(self, monkeypatch):
        monkeypatch.delenv("ALPHAVANTAGE_API_KEY", raising=False)
        monkeypatch.delenv("TICK_DIRECTION_SYMBOL", raising=False)
        cfg = PipelineConfig.from_env()
        assert cfg.symbol == "IBM"
        assert cfg.api_key is None


class TestCli:
    def test_offline_run_prints_accuracy(self, tmp_path, capsys):
        path = tmp_path / "raw.json"
        path.write_text(json.dumps(RAW))

        code = main(["--json-path", str(path)])

        out = capsys.readouterr().out
        assert code == 0
        assert "Symbol: IBM" in out
        assert "Observations: 4" in out
        assert "Naive Bayes Accuracy: 100.00%" in out

    def test_strict_flag_reports_error(self, tmp_path, capsys):
        raw = json.loads(json.dumps(RAW))
        raw["Time Series (1min)"]["2024-01-02 09:32:00"]["1. open"] = "bad"
        path = tmp_path / "raw.json"
        path.write_text(json.dumps(raw))

        code = main(["--json-path", str(path), "--strict"])

        assert code == 1
        assert "Error:" in capsys.readouterr().err

    def test_missing_api_key(self, monkeypatch, capsys):
        monkeypatch.delenv("ALPHAVANTAGE_API_KEY", raising=False)
        code = main([])
        assert code == 1
        assert "API key" in capsys.readouterr().err

    def test_plot_flag_saves_chart(self, tmp_path, capsys):
        import matplotlib

        matplotlib.use("Agg")
        path = tmp_path / "raw.json"
        path.write_text(json.dumps(RAW))
        chart = tmp_path / "chart.png"

        code = main(["--json-path", str(path), "--plot", "--plot-save", str(chart)])

        assert code == 0
        assert chart.exists()


class TestCliOrdering:
    def test_sort_flag_labels_newest_first_payload_in_time_order(self, tmp_path, capsys):
        raw = json.loads(json.dumps(RAW))
        raw["Time Series (1min)"] = dict(reversed(list(raw["Time Series (1min)"].items())))
        path = tmp_path / "raw.json"
        path.write_text(json.dumps(raw))

        code = main(["--json-path", str(path), "--sort"])

        out = capsys.readouterr().out
        assert code == 0
        assert "source order: descending, labeled: ascending" in out
        assert "Status: ok" in out

    def test_unsorted_newest_first_payload_is_degraded(self, tmp_path, capsys):
        raw = json.loads(json.dumps(RAW))
        raw["Time Series (1min)"] = dict(reversed(list(raw["Time Series (1min)"].items())))
        path = tmp_path / "raw.json"
        path.write_text(json.dumps(raw))

        code = main(["--json-path", str(path)])

        out = capsys.readouterr().out
        assert code == 0
        assert "labeled: descending" in out
        assert "Status: degraded" in out

    def test_sort_help_mentions_newest_first_source(self, capsys):
        with pytest.raises(SystemExit):
            main(["--help"])
        help_text = " ".join(capsys.readouterr().out.split())
        assert "newest bars first" in help_text
