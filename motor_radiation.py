"""
This module calculates the radiative heat loss from the motor casing to the
Martian surroundings.

The motor is treated as a grey body exchanging radiation with an enclosure
at the ambient air temperature (view factor of one).
"""
from constants import STEFAN_BOLTZMANN


class MotorRadiation:
    """
    A class to calculate the radiated power from the motor surface.

    The surface properties (emissivity and area) are set during
    initialization. The loss can then be calculated for any pair of
    motor and ambient temperatures.
    """

    def __init__(self, surface_emissivity: float, surface_area_m2: float,
                 stefan_boltzmann: float = STEFAN_BOLTZMANN):
        """
        Initializes the MotorRadiation calculator for a motor surface.

        Args:
            surface_emissivity (float): The emissivity of the motor casing.
                                        A value between 0 and 1.
            surface_area_m2 (float): The radiating surface area in m^2.
            stefan_boltzmann (float): Stefan-Boltzmann constant in W/(m^2.K^4).
        """
        if not 0.0 <= surface_emissivity <= 1.0:
            raise ValueError("Surface emissivity must be between 0 and 1.")

        self.emissivity = surface_emissivity
        self.area = surface_area_m2
        self.sigma = stefan_boltzmann

    def calculate_power(self, surface_temperature_K: float, ambient_temperature_K: float) -> float:
        """
        Calculates the net radiated power from the motor.

        Args:
            surface_temperature_K (float): The motor surface temperature in Kelvin.
            ambient_temperature_K (float): The surrounding temperature in Kelvin.

        Returns:
            float: The net radiated power in W. Positive means the motor
                   loses heat to its surroundings.
        """
        if surface_temperature_K < 0 or ambient_temperature_K < 0:
            raise ValueError("Temperatures must be in Kelvin and non-negative.")

        t_surf_4 = surface_temperature_K ** 4
        t_amb_4 = ambient_temperature_K ** 4

        return self.emissivity * self.sigma * self.area * (t_surf_4 - t_amb_4)
