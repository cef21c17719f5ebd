"""
Defines functions to re-run the heat budget over a range of freestream
velocities from a configuration dictionary.
"""
import copy

import numpy as np
import pandas as pd

from heat_budget import MotorHeatBudget


def create_velocity_range(v_min, v_max, v_step):
    """
    Builds the freestream velocities to sweep, including v_max when it
    falls on the grid.
    """
    if v_step <= 0:
        raise ValueError("Velocity step must be positive.")
    if v_min < 0:
        raise ValueError("Velocities must be non-negative.")
    if v_max < v_min:
        raise ValueError("Maximum velocity must not be below the minimum velocity.")
    # Half a step of headroom so v_max is not lost to rounding
    return np.arange(v_min, v_max + v_step / 2, v_step)


def sweep_freestream_velocity(config, velocities):
    """
    Runs the heat budget once per freestream velocity.

    Args:
        config (dict): The full budget configuration dictionary.
        velocities (np.array): Freestream velocities in m/s.

    Returns:
        pd.DataFrame: One row per velocity with columns velocity_ms,
            reynolds, nusselt, h_across, q_required, q_across, q_down.
    """
    sweep_config = copy.deepcopy(config)
    rows = []

    for v in velocities:
        sweep_config['operation']['freestream_velocity_ms'] = float(v)
        result = MotorHeatBudget(sweep_config).run()
        rows.append({
            'velocity_ms': float(v),
            'reynolds': result.across.reynolds,
            'nusselt': result.across.nusselt,
            'h_across': result.across.h,
            'q_required': float(result.q_required),
            'q_across': float(result.q_across),
            'q_down': float(result.q_down),
        })

    return pd.DataFrame(rows, columns=['velocity_ms', 'reynolds', 'nusselt', 'h_across',
                                       'q_required', 'q_across', 'q_down'])
