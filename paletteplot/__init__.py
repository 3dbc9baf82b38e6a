"""Palette Plot: chart and drag-edit a color palette across color-space dimensions."""

__version__ = "0.1.0"
