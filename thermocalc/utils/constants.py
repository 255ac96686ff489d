"""Physical constants used throughout ThermoCalc.

Gas properties are in kJ-based SI units (kJ/(kg·K)) to match the
calculators, which work in kPa, m³, kJ and kJ/kg.
"""

# Air (ideal gas, constant specific heats)
R_AIR = 0.287  # kJ/(kg·K), specific gas constant
CP_AIR = 1.005  # kJ/(kg·K)
CV_AIR = 0.718  # kJ/(kg·K)
GAMMA_AIR = 1.4

# Superheated steam approximation (used instead of steam tables)
CP_STEAM = 1.8723  # kJ/(kg·K)
GAMMA_STEAM = 1.32

# Radiation
STEFAN_BOLTZMANN = 5.67e-8  # W/(m²·K⁴)

# Thermodynamic
T_CELSIUS_OFFSET = 273.15  # K
T_CONDENSER_C = 45.0  # °C, condenser/pump outlet temperature convention

# Conversion factors (Imperial → SI)
RANKINE_TO_KELVIN = 5.0 / 9.0
PSI_TO_KPA = 6.89476
FT3_TO_M3 = 0.0283168
BTU_TO_KJ = 1.05506
BTU_PER_LB_TO_KJ_PER_KG = 2.326
HP_TO_KW = 0.7457
LB_TO_KG = 0.453592
FT_TO_M = 0.3048
FT2_TO_M2 = 0.092903
U_VALUE_IMPERIAL_TO_SI = 5.67826  # BTU/(hr·ft²·°F) → W/(m²·K)
LB_PER_FT3_TO_KG_PER_M3 = 16.0185
BTU_PER_LB_F_TO_KJ_PER_KG_K = 4.1868
KW_PER_K_TO_BTU_PER_HR_F = 1895.63
