"""Application layer: DTOs, ports, queries and session services."""
