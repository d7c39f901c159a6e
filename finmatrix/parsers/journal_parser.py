"""Parser for bulk journal import files (CSV)."""

import logging
from pathlib import Path
from typing import Dict, List

import pandas as pd
from pydantic import ValidationError

from finmatrix.exceptions import JournalImportError
from finmatrix.models import JournalEntry

logger = logging.getLogger(__name__)


class JournalParser:
    """
    Parses bulk journal import files.

    Format: ``Date, Description, DebitAccount, CreditAccount, Amount`` with a
    header line that is always skipped. Columns are read by position.
    Rows missing a date, either account or the amount are skipped; rows that
    fail entry validation (bad date, non-positive or non-numeric amount) are
    rejected and kept in ``rejected_rows``.
    """

    COLUMNS = ["date", "description", "debit_account", "credit_account", "amount"]
    REQUIRED_FIELDS = ["date", "debit_account", "credit_account", "amount"]
    DEFAULT_DESCRIPTION = "Imported Entry"

    def __init__(self, file_path: Path, tenant_id: str, id_prefix: str = "upload"):
        """
        Initialize parser with a journal CSV path.

        Args:
            file_path: Path to the journal CSV file
            tenant_id: Tenant every imported entry is tagged with
            id_prefix: Prefix for generated entry ids
        """
        self.file_path = Path(file_path)
        self.tenant_id = tenant_id
        self.id_prefix = id_prefix
        self.data = None
        self.entries: List[JournalEntry] = []
        self.skipped_rows: List[int] = []
        self.rejected_rows: List[Dict[str, object]] = []
        self._parse()

    def _read(self) -> pd.DataFrame:
        if not self.file_path.exists():
            raise JournalImportError(f"Journal file not found: {self.file_path}")
        try:
            data = pd.read_csv(
                self.file_path,
                header=None,
                skiprows=1,
                names=self.COLUMNS,
                index_col=False,
                dtype=str,
                keep_default_na=False,
                skipinitialspace=True,
                on_bad_lines="skip",
            )
        except pd.errors.EmptyDataError:
            return pd.DataFrame(columns=self.COLUMNS)
        except (pd.errors.ParserError, UnicodeDecodeError) as exc:
            raise JournalImportError(f"Cannot read journal file {self.file_path}: {exc}") from exc

        data = data.fillna("")
        for column in self.COLUMNS:
            data[column] = data[column].astype(str).str.strip()
        return data.reset_index(drop=True)

    def _parse(self):
        """Load the file and build journal entries."""
        self.data = self._read()

        for idx, row in self.data.iterrows():
            if any(not row[field] for field in self.REQUIRED_FIELDS):
                self.skipped_rows.append(int(idx))
                continue
            try:
                entry = JournalEntry(
                    id=f"{self.id_prefix}_{idx}",
                    date=row["date"],
                    description=row["description"] or self.DEFAULT_DESCRIPTION,
                    debit_account=row["debit_account"],
                    credit_account=row["credit_account"],
                    amount=row["amount"],
                    tenant_id=self.tenant_id,
                )
            except ValidationError as exc:
                reason = "; ".join(
                    f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
                )
                logger.warning("Rejected journal row %d in %s: %s", idx, self.file_path, reason)
                self.rejected_rows.append({"row": int(idx), "reason": reason, **row.to_dict()})
                continue
            self.entries.append(entry)

        if self.skipped_rows:
            logger.warning(
                "Skipped %d incomplete journal rows in %s", len(self.skipped_rows), self.file_path
            )
        logger.info("Loaded %d journal entries from %s", len(self.entries), self.file_path)

    def get_entries(self) -> List[JournalEntry]:
        """
        Get the valid journal entries in file order.

        Returns:
            List of JournalEntry
        """
        return list(self.entries)

    def get_all_rows(self) -> pd.DataFrame:
        """
        Get every data row as read, valid or not.

        Returns:
            DataFrame with COLUMNS
        """
        return self.data.copy()

    def validate_integrity(self) -> Dict[str, List[str]]:
        """
        Report rows that did not become entries.

        Returns:
            Dictionary with validation results
        """
        issues = {
            "missing_values": [],
            "invalid_values": [],
            "warnings": [],
        }

        for idx in self.skipped_rows:
            issues["missing_values"].append(f"Row {idx}: missing date, account or amount")
        for rejected in self.rejected_rows:
            issues["invalid_values"].append(f"Row {rejected['row']}: {rejected['reason']}")
        if self.data is not None and self.data.empty:
            issues["warnings"].append("Journal file contains no data rows")

        return issues
