"""ThermoCalc — closed-form thermodynamics calculation engine."""

__app_name__ = "ThermoCalc"
__version__ = "0.1.0"
