#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderer option classes."""

from org2bb.options.base import BaseRendererOptions, CloneFrozenMixin
from org2bb.options.bbcode import BBCodeRendererOptions

__all__ = ["BaseRendererOptions", "BBCodeRendererOptions", "CloneFrozenMixin"]
