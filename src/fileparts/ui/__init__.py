"""User interface adapters."""
