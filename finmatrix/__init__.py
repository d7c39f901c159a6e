"""FinMatrix ledger engine: journal entries to financial statements."""

__version__ = "0.1.0"
