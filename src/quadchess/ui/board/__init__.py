"""Board scene, view and piece tokens."""
