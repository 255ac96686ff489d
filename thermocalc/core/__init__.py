"""Core calculation modules for ThermoCalc.

This package contains the engineering calculators. All of them work in
SI units (kPa, m³, K or °C, kJ, kJ/kg, kW) and never convert units:
- properties: Air-standard gas property set
- ideal_gas: Closed-system ideal-gas processes
- cycles: Otto, Diesel, Brayton and Rankine power cycles
- heat_exchanger: LMTD and effectiveness-NTU rating
- refrigeration: Vapour-compression cycle (simplified enthalpy model)
- heat_transfer: Conduction, convection and radiation
- entropy: Second-law feasibility check
- diagrams: P-v and T-s plot data
- export: JSON export of a calculation
"""
