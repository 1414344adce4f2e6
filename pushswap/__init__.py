"""Two-stack integer sorting that reports the moves it uses, with small text and list helpers."""

__version__ = "0.1.0"