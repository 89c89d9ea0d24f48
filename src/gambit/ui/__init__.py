"""PyQt6 presentation layer: renders game state and feeds clicks back in."""
