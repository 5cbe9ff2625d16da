"""Stack-based view trees with layout, click handlers over state, and sample widgets."""

__version__ = "0.1.0"