"""Infrastructure layer - adapters, caches, stubs and observability."""
