"""wtp - What To Pick? Decision trees to help humans decide stuff"""

__version__ = "0.1.0"
