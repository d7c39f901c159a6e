"""Tests for users, tenant scoping and tenant reports."""

from datetime import date
from decimal import Decimal

import pytest

from finmatrix.core import EntryRepository, FinancialReportEngine, User, UserDirectory, UserRole
from finmatrix.core.tenancy import resolve_visible_tenant
from finmatrix.exceptions import TenantAccessError
from finmatrix.models import JournalEntry


def entry(idx, tenant_id, debit, credit, amount):
    return JournalEntry(
        id=str(idx),
        date=date(2024, 4, idx),
        debit_account=debit,
        credit_account=credit,
        amount=Decimal(amount),
        tenant_id=tenant_id,
    )


@pytest.fixture
def ca_user():
    return User(id="u1", name="Rajesh Kumar", email="rajesh@ca-firm.com", role=UserRole.CA)


@pytest.fixture
def client_user():
    return User(
        id="u2",
        name="TechSolutions Pvt Ltd",
        email="admin@techsolutions.com",
        role=UserRole.CLIENT,
        client_id="c1",
    )


@pytest.fixture
def repository():
    return EntryRepository(
        [
            entry(1, "c1", "Bank", "Share Capital", "5000000"),
            entry(2, "c2", "Bank", "Share Capital", "200000"),
            entry(3, "c1", "Accounts Receivable", "Sales", "2500000"),
            entry(4, "c2", "Office Rent", "Bank", "15000"),
        ]
    )


class TestUserDirectory:
    """Tests for UserDirectory."""

    def test_lookup(self, ca_user, client_user):
        directory = UserDirectory([ca_user, client_user])
        assert len(directory) == 2
        assert directory.get("u2") == client_user
        assert directory.get("missing") is None
        assert directory.find_by_email(" RAJESH@ca-firm.com ") == ca_user
        assert directory.find_by_email("nobody@example.com") is None
        assert directory.clients() == [client_user]

    def test_client_without_tenant_rejected(self):
        with pytest.raises(TenantAccessError):
            UserDirectory([User(id="u3", name="Loose", email="l@x.com", role=UserRole.CLIENT)])


class TestEntryRepository:
    """Tests for the shared entry log."""

    def test_filter_by_tenant_keeps_posting_order(self, repository):
        assert [e.id for e in repository.entries_for("c1")] == ["1", "3"]
        assert [e.id for e in repository.entries_for("c2")] == ["2", "4"]
        assert repository.entries_for("c404") == []

    def test_tenants_in_first_posted_order(self, repository):
        assert repository.tenants() == ["c1", "c2"]

    def test_append_and_extend(self, repository):
        repository.append(entry(5, "c3", "Cash", "Sales", "10"))
        added = repository.extend([entry(6, "c3", "Cash", "Sales", "20"), entry(7, "c1", "Cash", "Sales", "5")])
        assert added == 2
        assert len(repository) == 7
        assert repository.tenants() == ["c1", "c2", "c3"]

    def test_snapshot_is_independent(self, repository):
        snapshot = repository.entries_for("c1")
        repository.append(entry(8, "c1", "Cash", "Sales", "1"))
        assert len(snapshot) == 2


class TestVisibleTenant:
    """Tests for tenant access rules."""

    def test_client_bound_to_own_tenant(self, client_user):
        assert resolve_visible_tenant(client_user) == "c1"
        assert resolve_visible_tenant(client_user, "c1") == "c1"

    def test_client_cannot_view_other_tenant(self, client_user):
        with pytest.raises(TenantAccessError):
            resolve_visible_tenant(client_user, "c2")

    def test_ca_selects_tenant(self, ca_user):
        assert resolve_visible_tenant(ca_user, "c2") == "c2"

    def test_ca_must_select_tenant(self, ca_user):
        with pytest.raises(TenantAccessError):
            resolve_visible_tenant(ca_user)


class TestTenantReport:
    """Tests for FinancialReportEngine.generate_tenant_report."""

    @pytest.fixture
    def engine(self):
        return FinancialReportEngine()

    def test_client_report_isolated(self, engine, repository, client_user):
        report = engine.generate_tenant_report(repository, client_user)
        names = {l.account_name for l in report.ledgers}
        assert "Office Rent" not in names
        assert report.trading.total_revenue == Decimal("2500000")
        assert report.balance_sheet.total_assets == Decimal("7500000")

    def test_ca_report_for_selected_tenant(self, engine, repository, ca_user):
        report = engine.generate_tenant_report(repository, ca_user, "c2")
        assert report.pnl.net_profit == Decimal("-15000")
        assert report.balance_sheet.total_assets == Decimal("185000")

    def test_tenant_reports_are_independent(self, engine, repository, ca_user):
        c1 = engine.generate_tenant_report(repository, ca_user, "c1")
        c2 = engine.generate_tenant_report(repository, ca_user, "c2")
        combined = engine.generate_report(repository.entries_for("c1") + repository.entries_for("c2"))
        assert c1.pnl.net_profit + c2.pnl.net_profit == combined.pnl.net_profit

    def test_unknown_tenant_gives_empty_report(self, engine, repository, ca_user):
        report = engine.generate_tenant_report(repository, ca_user, "c404")
        assert report.ledgers == []
        assert report.pnl.net_profit == 0
