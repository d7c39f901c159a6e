"""Errors raised around the ledger core (never by it for well-formed input)."""


class FinMatrixError(Exception):
    """Base class for FinMatrix errors."""


class JournalImportError(FinMatrixError):
    """Raised when a journal import file cannot be read."""


class ChartOfAccountsError(FinMatrixError):
    """Raised when a chart of accounts file is structurally invalid."""


class TenantAccessError(FinMatrixError):
    """Raised when a user asks for entries of a tenant they are not bound to."""


class UnknownStatementError(FinMatrixError):
    """Raised when a statement table is requested for an unknown code."""
