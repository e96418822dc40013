"""Personal academic blog with a weight-decay regularization tutorial."""

__version__ = "1.0.0"
