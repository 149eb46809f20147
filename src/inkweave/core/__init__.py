"""Shared constants and helpers for the engine layers."""
