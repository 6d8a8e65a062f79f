"""Persistence package."""
