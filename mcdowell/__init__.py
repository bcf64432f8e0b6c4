__version__ = "Tip"
