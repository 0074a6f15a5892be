"""Word search puzzle generator packing horizontal and vertical words into a compact grid."""

__version__ = "0.1.0"