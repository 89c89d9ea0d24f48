"""Side panels around the board."""
