"""Brighten Solution site backend: content services and visitor tracking."""
