"""Application ports (interfaces to the outside world)."""

from cashflow.application.ports.transactions import TransactionReadPort

__all__ = ["TransactionReadPort"]
