"""Core SVG scene graph and theme tokens."""
