"""Interactive visualisation of complex-number rotation and multiplication."""

__version__ = "0.1.0"
