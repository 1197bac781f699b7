"""Domain layer: value objects and pure domain services."""
