"""Deterministic generative SVG patterns for social cards."""

from .generator import fallback_document, generate, generate_social_card
from .styles import available_styles

__all__ = ["available_styles", "fallback_document", "generate", "generate_social_card"]
