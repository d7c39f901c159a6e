"""Parser for chart of accounts files (CSV)."""

import logging
from enum import Enum
from pathlib import Path
from typing import Dict, List, Type

import pandas as pd

from finmatrix.exceptions import ChartOfAccountsError
from finmatrix.models import AccountHead, AccountType, CostCategory

logger = logging.getLogger(__name__)

TRUE_VALUES = {"true", "1", "yes", "y"}


def _parse_enum(enum_cls: Type[Enum], raw: str, default=None):
    text = raw.strip()
    if not text:
        if default is None:
            raise ValueError(f"missing {enum_cls.__name__}")
        return default
    lowered = text.lower()
    for member in enum_cls:
        if lowered in (member.value.lower(), member.name.lower(), member.name.lower().replace("_", " ")):
            return member
    raise ValueError(f"invalid {enum_cls.__name__} {text!r}")


class ChartParser:
    """
    Parses a chart of accounts CSV with the columns
    ``code, name, type, cost_category, is_direct``.

    ``type`` and ``cost_category`` accept either the display value
    (``Direct Material``) or the member name (``DIRECT_MATERIAL``); an empty
    cost category means not applicable.
    """

    REQUIRED_FIELDS = ["code", "name", "type"]
    OPTIONAL_FIELDS = ["cost_category", "is_direct"]

    def __init__(self, file_path: Path):
        """
        Initialize parser with chart file path.

        Args:
            file_path: Path to the chart CSV file
        """
        self.file_path = Path(file_path)
        self.data = None
        self.accounts: List[AccountHead] = []
        self._parse()

    def _parse(self):
        """Load and parse the chart file."""
        if not self.file_path.exists():
            raise ChartOfAccountsError(f"Chart file not found: {self.file_path}")

        try:
            self.data = pd.read_csv(
                self.file_path,
                dtype=str,
                keep_default_na=False,
                skipinitialspace=True,
            )
        except pd.errors.EmptyDataError as exc:
            raise ChartOfAccountsError(f"Chart file {self.file_path} is empty") from exc
        self.data.columns = [str(c).strip().lower() for c in self.data.columns]

        missing = [f for f in self.REQUIRED_FIELDS if f not in self.data.columns]
        if missing:
            raise ChartOfAccountsError(
                f"Chart file {self.file_path} is missing columns: {', '.join(missing)}"
            )
        for field in self.OPTIONAL_FIELDS:
            if field not in self.data.columns:
                self.data[field] = ""

        for idx, row in self.data.iterrows():
            try:
                self.accounts.append(
                    AccountHead(
                        code=row["code"].strip(),
                        name=row["name"].strip(),
                        type=_parse_enum(AccountType, row["type"]),
                        cost_category=_parse_enum(
                            CostCategory, row["cost_category"], CostCategory.NOT_APPLICABLE
                        ),
                        is_direct=row["is_direct"].strip().lower() in TRUE_VALUES,
                    )
                )
            except ValueError as exc:
                raise ChartOfAccountsError(f"Row {idx} of {self.file_path}: {exc}") from exc

        logger.info("Loaded %d account heads from %s", len(self.accounts), self.file_path)

    def get_accounts(self) -> List[AccountHead]:
        """
        Get all account heads in file order.

        Returns:
            List of AccountHead
        """
        return list(self.accounts)

    def get_account_names(self) -> List[str]:
        return [head.name for head in self.accounts]

    def validate_integrity(self) -> Dict[str, List[str]]:
        """
        Validate data integrity and report issues.

        Returns:
            Dictionary with validation results
        """
        issues = {
            "duplicate_names": [],
            "duplicate_codes": [],
            "warnings": [],
        }

        names = pd.Series(self.get_account_names(), dtype=str)
        codes = pd.Series([head.code for head in self.accounts], dtype=str)
        for name in sorted(names[names.duplicated()].unique()):
            issues["duplicate_names"].append(f"Duplicate account name (first wins): {name}")
        for code in sorted(codes[codes.duplicated()].unique()):
            issues["duplicate_codes"].append(f"Duplicate account code: {code}")
        if not self.accounts:
            issues["warnings"].append("Chart file contains no account heads")

        return issues
