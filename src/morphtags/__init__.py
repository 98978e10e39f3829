"""morphtags - RMAC and WIVU morphology tag decoder."""

__version__ = "0.1.0"
