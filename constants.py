"""
Stores shared physical constants and the reference flight case for the
motor heat budget.
"""

KELVIN_OFFSET = 273.15
STEFAN_BOLTZMANN = 5.67e-8
MARS_GRAVITY_M_S2 = 3.711

# Flow cases around the motor body
ACROSS_CYLINDER = 'AcrossCylinder'
DOWN_CYLINDER = 'DownCylinder'

DEFAULT_CONVECTION_MODELS = {
    ACROSS_CYLINDER: 'ChurchillBernstein',
    DOWN_CYLINDER: 'LaminarFlatPlate',
}

# Reference case: one rotor motor during a 10 minute flight on Mars.
# Same layout as the JSON configuration file.
REFERENCE_FLIGHT_CONFIG = {
    'operation': {
        'max_motor_temp_c': 50.0,
        'flight_time_s': 10 * 60,
        'freestream_velocity_ms': 40.0,
        'downward_velocity_ms': 40.0,
    },
    'environment': {
        'ambient_temp_c': -50.0,
        'density_kg_m3': 0.0139,
        'thermal_conductivity_w_m_k': 0.0096,
        'dynamic_viscosity_pa_s': 1.422e-5,
        'specific_heat_j_kg_k': 730.0,
        'gravity_m_s2': MARS_GRAVITY_M_S2,
        'stefan_boltzmann': STEFAN_BOLTZMANN,
    },
    'motor': {
        'rotor_power_w': 5578.0,
        'efficiency': 0.85,
        'mass_kg': 0.75,
        'specific_heat_j_kg_k': 100.0,  # metals range from ~15 to 420
        'radius_m': 0.05,
        'height_m': 0.2,
        'emissivity': 0.98,
    },
    'convection_models': dict(DEFAULT_CONVECTION_MODELS),
}
