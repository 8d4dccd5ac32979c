"""Physical constants and design thresholds used throughout Rocket Workshop.

All values in SI units unless otherwise noted.
"""

import math

# Gravitational
G_0 = 9.80665  # m/s², standard gravitational acceleration

# Mathematical
PI = math.pi

# Conversion factors
MPA_TO_PA = 1.0e6
N_TO_KN = 1.0e-3

# Feed system: pump discharge must overcome the injector pressure drop
PUMP_PRESSURE_MARGIN = 1.25

# Mixture ratio deviation limits (relative to the propellant optimum)
MIXTURE_WARNING_DEVIATION = 0.15
MIXTURE_ERROR_DEVIATION = 0.30
MIXTURE_PENALTY_SLOPE = 0.5

# Nozzle efficiency model (sea-level operation)
NOZZLE_OPTIMAL_EXPANSION = 16.0
NOZZLE_PEAK_EFFICIENCY = 0.98
NOZZLE_UNDEREXPANSION_PENALTY = 0.15
NOZZLE_OVEREXPANSION_PENALTY = 0.25

# Mass scaling reference points
CHAMBER_REFERENCE_PRESSURE = 7.0  # MPa
CHAMBER_PRESSURE_EXPONENT = 1.5
NOZZLE_REFERENCE_THROAT = 0.15  # m
NOZZLE_EXPANSION_EXPONENT = 0.7
PUMP_REFERENCE_PRESSURE = 10.0  # MPa
PUMP_PRESSURE_EXPONENT = 1.2
TANK_MASS_RATIO_ALUMINUM = 0.08
TANK_MASS_RATIO_DEFAULT = 0.12

# Cost: each property at its maximum setting adds up to 50 %
PROPERTY_COST_SLOPE = 0.5

# Advisory thresholds
MIN_THRUST_TO_WEIGHT = 1.0
MARGINAL_THRUST_TO_WEIGHT = 1.3
MIN_BURN_TIME = 10.0  # s
