"""Visual theme package."""
