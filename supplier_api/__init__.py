"""Supplier Management API."""
