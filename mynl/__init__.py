# mynl/__init__.py
# Trailing line-number filter for preparing code snippets for documentation

__version__ = "0.1.0"
