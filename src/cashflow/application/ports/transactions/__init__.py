"""Transaction ports (read side)."""

from cashflow.application.ports.transactions.transaction_read_port import (
    TransactionReadPort,
)

__all__ = ["TransactionReadPort"]
