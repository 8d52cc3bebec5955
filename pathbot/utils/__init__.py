"""Map, configuration and world generation helpers."""
