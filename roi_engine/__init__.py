"""Financial calculation engine for AI investment ROI estimates."""

__version__ = "0.1.0"
