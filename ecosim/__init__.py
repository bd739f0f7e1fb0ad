"""Grid-based predator-prey ecosystem simulation with a pygame viewer."""

__version__ = "0.1.0"