#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Formatting helpers used by the BBCode renderer."""
