"""initgen: generate re-exporting __init__.py files for Python package trees."""

__version__ = "0.1.0"
