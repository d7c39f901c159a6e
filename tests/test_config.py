"""Tests for report configuration."""

import json
import logging
from pathlib import Path

from finmatrix.config import ReportConfig, load_config
from finmatrix.core import DEFAULT_CHART_OF_ACCOUNTS


DATA_DIR = Path(__file__).resolve().parents[1] / "data"


def test_defaults():
    config = ReportConfig()
    assert config.company_name == "FinMatrix Client"
    assert config.currency_code == "INR"
    assert config.decimal_places == 0
    assert config.chart_path is None
    assert config.load_chart() == list(DEFAULT_CHART_OF_ACCOUNTS)


def test_unknown_keys_ignored(caplog):
    with caplog.at_level(logging.WARNING, logger="finmatrix.config"):
        config = ReportConfig.from_dict({"company_name": "Acme", "theme": "dark"})
    assert config.company_name == "Acme"
    assert "theme" in caplog.text


def test_load_config(tmp_path):
    path = tmp_path / "finmatrix.json"
    path.write_text(
        json.dumps(
            {
                "company_name": "TechSolutions Pvt Ltd",
                "decimal_places": 2,
                "chart_path": str(DATA_DIR / "chart_of_accounts.csv"),
            }
        ),
        encoding="utf-8",
    )
    config = load_config(path)
    assert config.company_name == "TechSolutions Pvt Ltd"
    assert config.decimal_places == 2
    assert len(config.load_chart()) == 16
