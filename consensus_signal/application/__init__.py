"""Application layer - orchestration of domain signals over infrastructure ports."""
