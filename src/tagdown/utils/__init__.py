"""Utility helpers shared by the tagdown renderers."""
