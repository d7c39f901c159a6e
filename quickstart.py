"""Quick start script to test the engine."""

import logging
from pathlib import Path

from finmatrix.core.engine import FinancialReportEngine
from finmatrix.parsers import JournalParser

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

# Load the sample journal
journal_path = Path(__file__).parent / 'data' / 'sample_journal.csv'
print(f"Loading journal from: {journal_path}")

parser = JournalParser(journal_path, tenant_id='c1')
entries = parser.get_entries()
print(f"\nJournal entries loaded: {len(entries)}")

# Run the pipeline
engine = FinancialReportEngine()
report = engine.generate_report(entries)

print(f"\n{'=' * 50}")
print(f"Gross Profit: {report.trading.gross_profit:,.0f}")
print(f"Net Profit:   {report.pnl.net_profit:,.0f}")
print(f"Total Assets: {report.balance_sheet.total_assets:,.0f}")
print(f"Cost of Sales: {report.cost_sheet.cost_of_sales:,.0f}")
print(f"{'=' * 50}")

validation = engine.validate_report(report)
print(f"\nValidation status: {validation['status']}")

print("\n✓ Engine initialized successfully!")
print("\nNext steps:")
print("1. Run 'python examples.py' to see detailed examples")
print("2. Run 'pytest tests/' to run unit tests")
print("3. Run 'python tools/export_report_csv.py --journal data/sample_journal.csv' to export statements")
