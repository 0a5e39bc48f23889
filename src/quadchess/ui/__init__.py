"""PyQt6 presentation layer: board scene, panels and the main window."""
