"""Transaction file importers."""

from cashflow.infrastructure.importers.transaction_file_loader import (
    load_transactions,
    parse_transaction,
)

__all__ = ["load_transactions", "parse_transaction"]
