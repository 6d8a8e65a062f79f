"""Infrastructure layer - adapters for persistence, transport and logging."""
