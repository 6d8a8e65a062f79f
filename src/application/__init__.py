"""Application layer - lifecycle orchestration and workflow use cases."""
