"""
Defines the motor and flight profile records and functions to create them
from a config dictionary.
"""
import math
from collections import namedtuple


Motor = namedtuple("Motor", ["rotor_power_w", "efficiency", "mass_kg", "specific_heat_j_kg_k",
                             "radius_m", "height_m", "emissivity"])

FlightProfile = namedtuple("FlightProfile", ["max_motor_temp_c", "flight_time_s",
                                             "freestream_velocity_ms", "downward_velocity_ms"])


def create_motor(config):
    """Creates a Motor from the 'motor' section of the config."""
    motor_props = config['motor']
    return Motor(
        rotor_power_w=motor_props['rotor_power_w'],
        efficiency=motor_props['efficiency'],
        mass_kg=motor_props['mass_kg'],
        specific_heat_j_kg_k=motor_props['specific_heat_j_kg_k'],
        radius_m=motor_props['radius_m'],
        height_m=motor_props['height_m'],
        emissivity=motor_props['emissivity']
    )


def create_flight_profile(config):
    """Creates a FlightProfile from the 'operation' section of the config."""
    operation = config['operation']
    return FlightProfile(
        max_motor_temp_c=operation['max_motor_temp_c'],
        flight_time_s=operation['flight_time_s'],
        freestream_velocity_ms=operation['freestream_velocity_ms'],
        downward_velocity_ms=operation['downward_velocity_ms']
    )


def surface_area_no_fins(motor):
    """
    Outer surface of the motor modelled as a closed cylinder without fins.

    Args:
        motor (Motor): The motor record.

    Returns:
        float: Side wall plus both end caps, in m^2.
    """
    r = motor.radius_m
    l = motor.height_m
    return 2 * math.pi * r * l + 2 * math.pi * r**2


def power_dissipated(motor):
    """Power lost as heat by one motor while delivering the rotor power (W)."""
    return (motor.rotor_power_w / motor.efficiency) * (1 - motor.efficiency)
