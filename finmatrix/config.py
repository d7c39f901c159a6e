"""Report configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

from finmatrix.models import AccountHead

logger = logging.getLogger(__name__)


@dataclass
class ReportConfig:
    """Settings shared by scripts that build and export reports."""

    company_name: str = "FinMatrix Client"
    currency_code: str = "INR"
    decimal_places: int = 0
    chart_path: Optional[str] = None
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "ReportConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))
        return cls(**{k: v for k, v in values.items() if k in known})

    def load_chart(self) -> List[AccountHead]:
        """Chart from ``chart_path`` when set, else the built-in chart."""
        from finmatrix.core.chart import DEFAULT_CHART_OF_ACCOUNTS
        from finmatrix.parsers import ChartParser

        if not self.chart_path:
            return list(DEFAULT_CHART_OF_ACCOUNTS)
        return ChartParser(Path(self.chart_path)).get_accounts()


def load_config(path: Path) -> ReportConfig:
    """Read a JSON config file."""
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    return ReportConfig.from_dict(payload)
