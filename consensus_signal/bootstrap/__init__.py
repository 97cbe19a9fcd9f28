"""Bootstrap wiring for consensus-signal collaborators."""
