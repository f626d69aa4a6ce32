"""Parking Control API."""
