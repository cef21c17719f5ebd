"""
Defines the Martian atmosphere record and the dimensionless groups derived
from it.
"""
from collections import namedtuple

from constants import KELVIN_OFFSET


MarsEnvironment = namedtuple("MarsEnvironment", [
    "ambient_temp_c", "density_kg_m3", "thermal_conductivity_w_m_k",
    "dynamic_viscosity_pa_s", "specific_heat_j_kg_k", "gravity_m_s2",
    "stefan_boltzmann"
])


def create_environment(config):
    """Creates a MarsEnvironment from the 'environment' section of the config."""
    env_props = config['environment']
    return MarsEnvironment(
        ambient_temp_c=env_props['ambient_temp_c'],
        density_kg_m3=env_props['density_kg_m3'],
        thermal_conductivity_w_m_k=env_props['thermal_conductivity_w_m_k'],
        dynamic_viscosity_pa_s=env_props['dynamic_viscosity_pa_s'],
        specific_heat_j_kg_k=env_props['specific_heat_j_kg_k'],
        gravity_m_s2=env_props['gravity_m_s2'],
        stefan_boltzmann=env_props['stefan_boltzmann']
    )


def celsius_to_kelvin(temp_c):
    return temp_c + KELVIN_OFFSET


def prandtl_number(env):
    """Pr = mu * c_p / k"""
    return env.dynamic_viscosity_pa_s * env.specific_heat_j_kg_k / env.thermal_conductivity_w_m_k


def reynolds_number(env, velocity_ms, length_m):
    """Re = rho * v * L / mu"""
    return env.density_kg_m3 * velocity_ms * length_m / env.dynamic_viscosity_pa_s


def kinematic_viscosity(env):
    return env.dynamic_viscosity_pa_s / env.density_kg_m3
