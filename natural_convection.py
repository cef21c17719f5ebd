"""
Estimates the free convection heat transfer coefficient (h) on the motor
casing when the airflow is driven only by buoyancy.
"""

from collections import namedtuple

from environment import prandtl_number, kinematic_viscosity

NaturalConvectionResult = namedtuple("NaturalConvectionResult", [
    "grashof", "rayleigh", "nusselt", "h"
])


class NaturalConvection:
    """
    Calculates the natural convection coefficient with the Churchill-Chu
    correlation for a vertical plate. The motor height is the characteristic
    length in the direction of gravity.
    """

    def __init__(self, env):
        self.env = env

    def calculate_h(self, motor, surface_temp_K, ambient_temp_K):
        """
        Calculates the natural convection coefficient.

        Args:
            motor (Motor): Motor geometry.
            surface_temp_K (float): Motor surface temperature in Kelvin.
            ambient_temp_K (float): Ambient air temperature in Kelvin.

        Returns:
            NaturalConvectionResult: Gr, Ra, Nu and h (W/m^2.K).
        """
        delta_t_abs = abs(surface_temp_K - ambient_temp_K)
        if delta_t_abs < 1e-6:
            return NaturalConvectionResult(grashof=0.0, rayleigh=0.0, nusselt=0.0, h=0.0)

        l_char = motor.height_m
        t_film = (surface_temp_K + ambient_temp_K) / 2
        beta = 1.0 / t_film
        nu_val = kinematic_viscosity(self.env)
        pr = prandtl_number(self.env)

        gr = self.env.gravity_m_s2 * beta * delta_t_abs * l_char**3 / nu_val**2
        ra = gr * pr
        nu = (0.825 + (0.387 * ra**(1/6)) / (1 + (0.492 / pr)**(9/16))**(8/27))**2
        h = nu * self.env.thermal_conductivity_w_m_k / l_char

        return NaturalConvectionResult(grashof=gr, rayleigh=ra, nusselt=nu, h=h)
