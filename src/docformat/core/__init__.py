"""Core processing components for docformat."""
