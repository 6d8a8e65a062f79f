"""Infrastructure utilities."""
