"""Repository factory protocol."""

from typing import Protocol

from cashflow.application.ports.transactions import TransactionReadPort


class RepositoryFactory(Protocol):
    """Creates the ports a query needs."""

    def transaction_read_port(self) -> TransactionReadPort: ...
