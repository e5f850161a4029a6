"""Synthetic data generation."""

from .synthetic import make_blobs

__all__ = ["make_blobs"]
