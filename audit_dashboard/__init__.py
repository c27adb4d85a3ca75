"""Audit Dashboard API — compliance audit tracking for a flat list of companies."""
