"""qrtrace — QR module outlining and styled SVG rendering."""

__version__ = "0.1.0"
