"""Workflow service provider implementations."""
