"""gemurl: URL resolution and host transcoding for Gemini clients."""

__version__ = "0.1.0"
