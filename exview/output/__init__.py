"""Immutable rendering-configuration values produced by ``exview.options``."""
