"""Factories wiring ports into queries."""

from cashflow.application.factories.repository_factory import RepositoryFactory

__all__ = ["RepositoryFactory"]
