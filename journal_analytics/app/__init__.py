"""FastAPI application hosting the journal analytics engine."""
