"""Organization structure audit: long reporting lines and manager pay gaps."""

__version__ = "0.1.0"
