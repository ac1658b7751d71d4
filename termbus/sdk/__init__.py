"""Kit for writing, serving and checking plugins."""

__all__ = ["api", "cli", "utils"]