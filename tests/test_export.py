"""Tests for CSV export."""

import csv

from housing_sim_ch import ParameterSet, calculate_scenario
from housing_sim_ch.export import YEARLY_COLUMNS, summary_rows, write_csv


class TestWriteCsv:
    def setup_method(self):
        self.result = calculate_scenario(ParameterSet())

    def test_layout(self, tmp_path):
        path = write_csv(self.result, tmp_path / "out" / "result.csv")
        with open(path, newline="", encoding="utf-8") as f:
            rows = list(csv.reader(f))
        n_summary = len(summary_rows(self.result))
        assert rows[n_summary] == []
        assert rows[n_summary + 1] == YEARLY_COLUMNS
        data = rows[n_summary + 2:]
        assert len(data) == 51
        assert data[0][0] == "0"
        assert data[-1][0] == "50"

    def test_summary(self):
        summary = dict(summary_rows(self.result))
        assert summary["total_mortgage"] == "800000.00"
        assert summary["initial_investment"] == "208000.00"
        assert summary["affordable"] == "no"
        assert summary["utilization_percent"] == "43.20"

    def test_columns_start_with_year(self):
        assert YEARLY_COLUMNS[0] == "year"
        assert "net_wealth_ownership" in YEARLY_COLUMNS
