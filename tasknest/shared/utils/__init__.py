"""Shared utilities."""

from tasknest.shared.utils.generators import generate_cuid

__all__ = ["generate_cuid"]
