"""Shared infrastructure for the gateway and product services."""
