"""Grid-based raycasting engine: scene parsing, physics, doors, rendering and a minimap."""

__version__ = "0.1.0"