"""Utilities package for the Bakery Manager application."""
