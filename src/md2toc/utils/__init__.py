"""Utility helpers for md2toc."""
