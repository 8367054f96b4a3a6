"""Discord soundboard bot: plays short sound clips on prefixed chat commands."""

__version__ = "0.1.0"
