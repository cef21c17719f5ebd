"""
Calculates the heat the motor must shed by convection to stay at its
maximum allowable temperature over a flight.

The motor is a lumped body: dissipated power is either stored in the motor
mass, radiated to the surroundings, or has to be carried away by convection.
"""
from collections import namedtuple

import numpy as np

from environment import celsius_to_kelvin
from motor import surface_area_no_fins, power_dissipated
from motor_radiation import MotorRadiation


RequiredDissipation = namedtuple("RequiredDissipation", [
    "delta_t", "motor_temp_k", "ambient_temp_k", "surface_area_m2",
    "p_dissipated", "p_accumulated", "p_radiated", "q_required", "h_required"
])


def calculate_required_dissipation(motor, flight, env):
    """
    Runs the energy balance for one motor.

    Args:
        motor (Motor): Motor specification.
        flight (FlightProfile): Operating limits and flight duration.
        env (MarsEnvironment): Ambient conditions.

    Returns:
        RequiredDissipation: All intermediate powers plus the required
            convective rate (W) and coefficient (W/m^2.K).
    """
    # Temperature span is taken in Celsius, before the Kelvin conversion
    delta_t = np.float64(flight.max_motor_temp_c - env.ambient_temp_c)
    motor_temp_k = celsius_to_kelvin(flight.max_motor_temp_c)
    ambient_temp_k = celsius_to_kelvin(env.ambient_temp_c)

    area = surface_area_no_fins(motor)

    p_dis = power_dissipated(motor)
    p_accum = motor.mass_kg * motor.specific_heat_j_kg_k * delta_t / flight.flight_time_s
    radiation = MotorRadiation(motor.emissivity, area, env.stefan_boltzmann)
    p_rad = radiation.calculate_power(motor_temp_k, ambient_temp_k)

    q_req = p_dis - p_accum - p_rad

    # inf/nan with a RuntimeWarning when delta_t is zero
    h_req = np.divide(q_req, area * delta_t)

    return RequiredDissipation(
        delta_t=delta_t,
        motor_temp_k=motor_temp_k,
        ambient_temp_k=ambient_temp_k,
        surface_area_m2=area,
        p_dissipated=p_dis,
        p_accumulated=p_accum,
        p_radiated=p_rad,
        q_required=q_req,
        h_required=h_req
    )
