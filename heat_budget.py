"""
Defines the MotorHeatBudget model. It sets up the motor, flight profile,
atmosphere and convection models from a config dictionary and runs the
heat budget in a single pass:

- required heat dissipation from the motor energy balance
- achievable heat transfer for flow across and down the cylinder
- a free convection estimate for comparison
"""
from collections import namedtuple

from constants import ACROSS_CYLINDER, DOWN_CYLINDER, DEFAULT_CONVECTION_MODELS
from environment import create_environment
from forced_convection import ForcedConvectionAlgorithm, heat_transfer_rate
from heat_dissipation import calculate_required_dissipation
from motor import create_motor, create_flight_profile
from natural_convection import NaturalConvection


HeatBudgetResult = namedtuple("HeatBudgetResult", [
    "required", "across", "down", "natural",
    "q_required", "q_across", "q_down", "q_natural"
])


class MotorHeatBudget:
    """
    Represents a single motor flying through the Martian atmosphere.
    """

    def __init__(self, config):
        """
        Initializes the budget from a config dictionary with 'operation',
        'environment' and 'motor' sections and an optional
        'convection_models' section.
        """
        self.motor = create_motor(config)
        self.flight = create_flight_profile(config)
        self.env = create_environment(config)

        model_assignments = config.get('convection_models') or DEFAULT_CONVECTION_MODELS
        self.forced_convection_model = ForcedConvectionAlgorithm(model_assignments)
        self.natural_convection_model = NaturalConvection(self.env)

    def run(self):
        """
        Runs the heat budget and returns a HeatBudgetResult.
        """
        required = calculate_required_dissipation(self.motor, self.flight, self.env)
        area = required.surface_area_m2
        delta_t = required.delta_t

        # --- Flow across the cylinder (characteristic length = diameter) ---
        across = self.forced_convection_model.calculate_h(
            ACROSS_CYLINDER, self.motor, self.env, self.flight.freestream_velocity_ms
        )

        # --- Flow down the cylinder (characteristic length = height) ---
        down = self.forced_convection_model.calculate_h(
            DOWN_CYLINDER, self.motor, self.env, self.flight.downward_velocity_ms
        )

        natural = self.natural_convection_model.calculate_h(
            self.motor, required.motor_temp_k, required.ambient_temp_k
        )

        return HeatBudgetResult(
            required=required,
            across=across,
            down=down,
            natural=natural,
            q_required=required.q_required,
            q_across=heat_transfer_rate(across.h, area, delta_t),
            q_down=heat_transfer_rate(down.h, area, delta_t),
            q_natural=heat_transfer_rate(natural.h, area, delta_t)
        )
