"""Export statement tables for a journal file to CSV, e.g. for golden regression approval."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from finmatrix.config import ReportConfig, load_config
from finmatrix.core.engine import FinancialReportEngine
from finmatrix.core.tables import STATEMENT_CODES
from finmatrix.parsers import JournalParser


GOLDEN_COLUMNS = [
    "stmt",
    "line",
    "section",
    "label",
    "formatted_value",
]


def main() -> int:
    parser = argparse.ArgumentParser(description="Export statement tables built from a journal CSV.")
    parser.add_argument("--journal", required=True, help="Journal import CSV")
    parser.add_argument("--tenant", default="c1", help="Tenant id the entries belong to")
    parser.add_argument("--config", default=None, help="JSON report config")
    parser.add_argument("--chart", default=None, help="Chart of accounts CSV (overrides config)")
    parser.add_argument(
        "--stmt",
        action="append",
        choices=STATEMENT_CODES,
        help="Statement code; repeat for several (default: all)",
    )
    parser.add_argument("--out-dir", default="reports", help="Output directory")
    parser.add_argument("--company", default=None, help="Company name used as file prefix")
    parser.add_argument(
        "--golden",
        action="store_true",
        help="Write only the golden comparison columns as <journal>_<stmt>.csv",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default from config)")
    args = parser.parse_args()

    config = load_config(Path(args.config)) if args.config else ReportConfig()
    if args.chart:
        config.chart_path = args.chart
    if args.company:
        config.company_name = args.company
    logging.basicConfig(
        level=(args.log_level or config.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    journal = JournalParser(Path(args.journal), tenant_id=args.tenant)
    entries = journal.get_entries()
    if not entries:
        raise SystemExit(f"No valid journal entries in {args.journal}")

    engine = FinancialReportEngine(config.load_chart(), decimal_places=config.decimal_places)
    report = engine.generate_report(entries)
    out_dir = Path(args.out_dir)

    if args.golden:
        out_dir.mkdir(parents=True, exist_ok=True)
        stem = Path(args.journal).stem.replace("_journal", "")
        for code, table in engine.build_statement_tables(report, args.stmt).items():
            out_path = out_dir / f"{stem}_{code}.csv"
            table[GOLDEN_COLUMNS].to_csv(out_path, index=False)
            print(f"Exported {len(table)} rows to {out_path}")
        print("Check these tables by hand before approving them as golden files.")
        return 0

    written = engine.export_report_csv(report, out_dir, config.company_name, args.stmt)
    for path in written:
        print(f"Wrote {path}")

    validation = engine.validate_report(report)
    print(f"Validation status: {validation['status']}")
    return 0 if validation["status"] == "pass" else 1


if __name__ == "__main__":
    raise SystemExit(main())
