"""Meeting scribe: buffers group chat messages and posts periodic meeting minutes."""

__version__ = "0.1.0"
