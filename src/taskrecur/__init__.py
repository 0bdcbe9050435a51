"""taskrecur - recurring-date computation for task managers."""

__version__ = "0.1.0"
