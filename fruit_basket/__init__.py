"""
Fruit Basket - running total of a fruit basket typed at the console.

Reads fruit names one per line, adds them to a basket and prints the total
after batch discounts.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
