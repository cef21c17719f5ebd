"""
Implements the forced convection correlations for the heat transfer
coefficient (h) on the motor casing in the Martian airflow.
"""

from collections import namedtuple

from constants import ACROSS_CYLINDER, DOWN_CYLINDER
from environment import prandtl_number, reynolds_number

# Hilpert constants for a circular cylinder in cross flow:
# (Re_min, Re_max, C, m)
HILPERT_BANDS = [
    (0.4, 4.0, 0.989, 0.330),
    (4.0, 40.0, 0.911, 0.385),
    (40.0, 4000.0, 0.683, 0.466),
    (4000.0, 40000.0, 0.193, 0.618),
    (40000.0, 400000.0, 0.027, 0.805),
]

# Laminar/turbulent transition on a flat plate
FLAT_PLATE_RE_CRIT = 5e5

ConvectionResult = namedtuple("ConvectionResult", [
    "flow_case", "model", "characteristic_length_m", "velocity_ms",
    "reynolds", "prandtl", "nusselt", "h"
])


class ForcedConvectionAlgorithm:
    """
    Calculates the convective heat transfer coefficient (h) for a flow case
    around the cylindrical motor body.

    Each flow case fixes the characteristic length of the problem (the
    diameter for flow across the cylinder, the height for flow down it) and
    is mapped to a named Nusselt correlation.
    """

    def __init__(self, model_assignments):
        """
        Initializes the algorithm with user-defined model assignments.

        Args:
            model_assignments (dict): A dictionary mapping flow cases to the
                desired Nusselt correlation.
                Example: {'AcrossCylinder': 'ChurchillBernstein',
                          'DownCylinder': 'LaminarFlatPlate'}
        """
        self.models = model_assignments

    def calculate_h(self, flow_case, motor, env, velocity_ms):
        """
        Calculates the convective heat transfer coefficient for a flow case.

        Args:
            flow_case (str): 'AcrossCylinder' or 'DownCylinder'.
            motor (Motor): Motor geometry.
            env (MarsEnvironment): Atmospheric properties.
            velocity_ms (float): Flow speed relative to the motor in m/s.

        Returns:
            ConvectionResult: The dimensionless groups and h (W/m^2.K).
        """
        model_name = self.models.get(flow_case)
        if not model_name:
            raise ValueError(f"No forced convection model assigned for flow case: {flow_case}")

        l_char = self._characteristic_length(flow_case, motor)
        re = reynolds_number(env, velocity_ms, l_char)
        pr = prandtl_number(env)
        nu = self._calculate_nu(model_name, re, pr)
        h = nu * env.thermal_conductivity_w_m_k / l_char

        return ConvectionResult(
            flow_case=flow_case,
            model=model_name,
            characteristic_length_m=l_char,
            velocity_ms=velocity_ms,
            reynolds=re,
            prandtl=pr,
            nusselt=nu,
            h=h
        )

    def _characteristic_length(self, flow_case, motor):
        """Diameter across the cylinder, height along it."""
        if flow_case == ACROSS_CYLINDER:
            return 2 * motor.radius_m
        elif flow_case == DOWN_CYLINDER:
            return motor.height_m
        else:
            raise ValueError(f"Invalid flow case. Must be '{ACROSS_CYLINDER}' or '{DOWN_CYLINDER}'.")

    def _calculate_nu(self, model_name, re, pr):
        """Dispatcher for the Nusselt correlations."""
        models = {
            'ChurchillBernstein': self._nu_churchill_bernstein,
            'Hilpert': self._nu_hilpert,
            'LaminarFlatPlate': self._nu_laminar_flat_plate,
            'MixedFlatPlate': self._nu_mixed_flat_plate,
        }
        if model_name not in models:
            raise ValueError(f"Unknown forced convection model: {model_name}")
        return models[model_name](re, pr)

    def _nu_churchill_bernstein(self, re, pr):
        # Cylinder in cross flow, valid for Re * Pr > 0.2
        return 0.3 + (0.62 * re**0.5 * pr**(1/3) / (1 + (0.4/pr)**(2/3)) ** (1/4)) * \
            (1 + (re/282000)**(5/8)) ** (4/5)

    def _nu_hilpert(self, re, pr):
        for re_min, re_max, c, m in HILPERT_BANDS:
            if re_min <= re <= re_max:
                return c * re**m * pr**(1/3)
        raise ValueError(f"Reynolds number {re:.4g} outside the Hilpert correlation range (0.4 - 400000).")

    def _nu_laminar_flat_plate(self, re, pr):
        # Average over a laminar boundary layer
        return 0.664 * re**0.5 * pr**(1/3)

    def _nu_mixed_flat_plate(self, re, pr):
        if re <= FLAT_PLATE_RE_CRIT:
            return self._nu_laminar_flat_plate(re, pr)
        # 871 corresponds to transition at Re = 5e5
        return (0.037 * re**0.8 - 871) * pr**(1/3)


def heat_transfer_rate(h, area_m2, delta_t):
    """Q = h * A * dT (W)"""
    return h * area_m2 * delta_t
