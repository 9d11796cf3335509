"""Tests for the command-line entry points."""

import json
import sys

import pytest
from housing_sim_ch import ParameterSet, PurchaseParams, QuickStartParams, cli, params_to_dict, scenario_cli
from housing_sim_ch.config import parse_args


def _run(monkeypatch, module, *argv):
    monkeypatch.setattr(sys, "argv", ["housing-sim-ch", *argv])
    module.main()


class TestMain:
    def test_json_output(self, monkeypatch, capsys, tmp_path):
        _run(monkeypatch, cli, "--json", "--config", str(tmp_path / "none.toml"))
        data = json.loads(capsys.readouterr().out)
        assert len(data["yearly_data"]) == 51
        assert data["kpis"]["initial_investment"] == pytest.approx(208_000)

    def test_table_output(self, monkeypatch, capsys, tmp_path):
        _run(monkeypatch, cli, "--config", str(tmp_path / "none.toml"), "--years", "10")
        out = capsys.readouterr().out
        assert "Tragbarkeit" in out
        assert "Jahresverlauf" in out

    def test_csv(self, monkeypatch, tmp_path):
        csv_path = tmp_path / "result.csv"
        _run(monkeypatch, cli, "--config", str(tmp_path / "none.toml"), "--json", "--csv", str(csv_path))
        assert csv_path.exists()

    def test_invalid_params_exit(self, monkeypatch, capsys, tmp_path):
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch, cli, "--config", str(tmp_path / "none.toml"), "--household-income", "0")
        assert exc.value.code == 1
        assert "Household income" in capsys.readouterr().err

    def test_params_json(self, monkeypatch, capsys, tmp_path):
        path = tmp_path / "params.json"
        path.write_text(json.dumps({"rent": {"netRent": 3_100}}), encoding="utf-8")
        _run(monkeypatch, cli, "--json", "--params-json", str(path))
        data = json.loads(capsys.readouterr().out)
        assert data["kpis"]["monthly_rent"] == 3_100


class TestScenarioMain:
    def test_prints_all_scenarios(self, monkeypatch, capsys, tmp_path):
        _run(monkeypatch, scenario_cli, "--config", str(tmp_path / "none.toml"), "--years", "20")
        out = capsys.readouterr().out
        for name in ("pessimistic", "base", "optimistic"):
            assert name in out


class TestParseArgs:
    """Saved sections keep their own purchase price and equity."""

    SAVED = ParameterSet(
        quick_start=QuickStartParams(purchase_price=1_000_000, equity=200_000),
        purchase=PurchaseParams(purchase_price=900_000, equity=250_000),
    )

    def _parse(self, monkeypatch, *argv):
        monkeypatch.setattr(sys, "argv", ["housing-sim-ch", *argv])
        _, params, _ = parse_args("test")
        return params

    def test_params_json_sections_differ(self, monkeypatch, tmp_path):
        path = tmp_path / "params.json"
        path.write_text(json.dumps(params_to_dict(self.SAVED)), encoding="utf-8")
        params = self._parse(monkeypatch, "--params-json", str(path))
        assert params.purchase == self.SAVED.purchase
        assert params.quick_start == self.SAVED.quick_start

    def test_toml_sections_differ(self, monkeypatch, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text(
            "[quick_start]\npurchase_price = 1000000\nequity = 200000\n\n"
            "[purchase]\npurchase_price = 900000\nequity = 250000\n",
            encoding="utf-8",
        )
        params = self._parse(monkeypatch, "--config", str(path))
        assert params.purchase.purchase_price == 900_000
        assert params.purchase.equity == 250_000
        assert params.quick_start.purchase_price == 1_000_000

    def test_cli_flag_sets_both_sections(self, monkeypatch, tmp_path):
        path = tmp_path / "params.json"
        path.write_text(json.dumps(params_to_dict(self.SAVED)), encoding="utf-8")
        params = self._parse(monkeypatch, "--params-json", str(path), "--equity", "300000")
        assert params.purchase.equity == 300_000
        assert params.quick_start.equity == 300_000
        assert params.purchase.purchase_price == 900_000

    def test_top_level_config_key_sets_both_sections(self, monkeypatch, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("purchase_price = 800000\n\n[purchase]\nequity = 250000\n", encoding="utf-8")
        params = self._parse(monkeypatch, "--config", str(path))
        assert params.purchase.purchase_price == 800_000
        assert params.quick_start.purchase_price == 800_000
        assert params.purchase.equity == 250_000
