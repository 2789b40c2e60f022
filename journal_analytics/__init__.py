"""Journal analytics service."""
