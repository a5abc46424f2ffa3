"""Sprite compilation stages: optimize, parse, catalog, lay out, emit."""
