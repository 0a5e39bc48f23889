"""Side panels next to the board."""
