"""ThermoCalc command-line interface package.

Supports ``python -m thermocalc.cli`` as an alternative to the ``thermocalc`` entry point.
"""

from thermocalc.cli.main import cli, main

__all__ = ["cli", "main"]
