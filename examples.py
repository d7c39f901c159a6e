"""Example usage of the FinMatrix ledger engine."""

import logging
from pathlib import Path

from finmatrix.config import ReportConfig
from finmatrix.core import EntryRepository, User, UserDirectory, UserRole
from finmatrix.core.engine import FinancialReportEngine
from finmatrix.models import CostCategory
from finmatrix.parsers import JournalParser


def main():
    config = ReportConfig(company_name='TechSolutions Pvt Ltd')
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")

    data_dir = Path(__file__).parent / 'data'
    engine = FinancialReportEngine(config.load_chart(), decimal_places=config.decimal_places)

    print("=" * 60)
    print("FinMatrix Ledger Engine - Examples")
    print("=" * 60)

    # Example 1: Import a journal file
    print("\n[Example 1] Import the sample journal")
    print("-" * 60)
    parser = JournalParser(data_dir / 'sample_journal.csv', tenant_id='c1')
    entries = parser.get_entries()
    print(f"Imported {len(entries)} entries")
    issues = parser.validate_integrity()
    for check_name, found in issues.items():
        print(f"  {check_name}: {len(found)}")

    # Example 2: Ledger balances
    print("\n[Example 2] Ledger balances")
    print("-" * 60)
    ledgers = engine.generate_ledgers(entries)
    for ledger in ledgers:
        print(f"  {ledger.account_name:<25} {ledger.type.value:<10} {ledger.closing_balance:>15,.0f}")
    trial_balance = engine.validate_ledgers(ledgers)
    print(f"\nTrial balance agrees: {trial_balance['is_balanced']}")

    # Example 3: Statements
    print("\n[Example 3] Trading, P&L and balance sheet")
    print("-" * 60)
    report = engine.generate_statements(ledgers)
    print(f"Total Revenue: {report.trading.total_revenue:,.0f}")
    print(f"Total COGS:    {report.trading.total_cogs:,.0f}")
    print(f"Gross Profit:  {report.trading.gross_profit:,.0f}")
    print(f"Net Profit:    {report.pnl.net_profit:,.0f}")
    print(f"Total Assets:  {report.balance_sheet.total_assets:,.0f}")

    # Example 4: Cost sheet
    print("\n[Example 4] Cost sheet")
    print("-" * 60)
    for category, items in report.cost_sheet.details.items():
        if items:
            print(f"  {category.value}: {', '.join(l.account_name for l in items)}")
    print(f"Prime Cost:         {report.cost_sheet.prime_cost:,.0f}")
    print(f"Works Cost:         {report.cost_sheet.works_cost:,.0f}")
    print(f"Cost of Production: {report.cost_sheet.cost_of_production:,.0f}")
    print(f"Cost of Sales:      {report.cost_sheet.cost_of_sales:,.0f}")
    labor = [l.account_name for l in report.cost_sheet.details[CostCategory.DIRECT_LABOR]]
    print(f"Direct labor accounts also shown in COGS: {labor}")

    # Example 5: Presentation tables
    print("\n[Example 5] Balance sheet table")
    print("-" * 60)
    table = engine.build_statement_table(report, 'BS')
    print(table[['section', 'label', 'formatted_value']].to_string(index=False))

    # Example 6: Tenant scoped reports
    print("\n[Example 6] Tenant scoped reports")
    print("-" * 60)
    directory = UserDirectory([
        User(id='u1', name='Rajesh Kumar', email='rajesh@ca-firm.com', role=UserRole.CA),
        User(id='u2', name='TechSolutions Pvt Ltd', email='admin@techsolutions.com',
             role=UserRole.CLIENT, client_id='c1'),
    ])
    repository = EntryRepository(entries)
    client = directory.find_by_email('admin@techsolutions.com')
    tenant_report = engine.generate_tenant_report(repository, client)
    print(f"{client.name} sees net profit {tenant_report.pnl.net_profit:,.0f}")
    for tenant_id in repository.tenants():
        ca_report = engine.generate_tenant_report(repository, directory.get('u1'), tenant_id)
        print(f"CA view of {tenant_id}: total assets {ca_report.balance_sheet.total_assets:,.0f}")

    # Example 7: Validation
    print("\n[Example 7] Validate report")
    print("-" * 60)
    validation = engine.validate_report(report)
    print(f"Status: {validation['status']}")
    print(f"Liabilities + Equity: {validation['balance_sheet']['total_liabilities_and_equity']:,.0f}")

    print("\n" + "=" * 60)
    print("Examples completed!")
    print("=" * 60)


if __name__ == "__main__":
    main()
