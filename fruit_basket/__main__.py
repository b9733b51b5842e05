"""
Entry point for running fruit_basket as a module.

Allows running as: python -m fruit_basket
"""

from fruit_basket.cli import cli_main

if __name__ == "__main__":
    cli_main()
