"""Page modules. Each exposes a zero-argument ``render()``."""
