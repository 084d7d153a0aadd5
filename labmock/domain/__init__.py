"""Domain Layer - Bindings, errors and manager contracts."""
