"""
Main script to compute the heat dissipation budget of a motor flying in the
Martian atmosphere.

Run without arguments for the reference flight case, or pass a JSON
configuration file to override any of its sections.
"""
import argparse
import copy
import json
import sys

import pandas as pd

from constants import REFERENCE_FLIGHT_CONFIG
from heat_budget import MotorHeatBudget
from plotting import plot_velocity_sweep
from reporting import format_report, format_diagnostics
from velocity_sweep import create_velocity_range, sweep_freestream_velocity


def load_config(config_path=None):
    """
    Returns the reference configuration, with each section of the JSON file
    at config_path (if given) merged over it.
    """
    config = copy.deepcopy(REFERENCE_FLIGHT_CONFIG)
    if config_path is None:
        return config

    with open(config_path, 'r') as f:
        overrides = json.load(f)

    if not isinstance(overrides, dict):
        raise ValueError("Configuration file must contain a JSON object.")
    for section, values in overrides.items():
        if section not in config:
            raise ValueError(f"Unknown configuration section: '{section}'")
        if not isinstance(values, dict):
            raise ValueError(f"Configuration section '{section}' must be a JSON object.")
        config[section].update(values)
    return config


def run_budget_from_config(config_path=None, verbose=False, sweep=None, plot=False):
    """
    Loads the configuration, runs the heat budget and prints the results.

    Args:
        config_path (str, optional): Path to a JSON configuration file.
        verbose (bool): Also print the intermediate values.
        sweep (tuple, optional): (v_min, v_max, v_step) freestream velocities
            in m/s to sweep after the main run.
        plot (bool): Plot the sweep results.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        print(f"Error: Configuration file not found at '{config_path}'", file=sys.stderr)
        sys.exit(1)
    except json.JSONDecodeError:
        print(f"Error: Could not parse JSON in configuration file '{config_path}'.", file=sys.stderr)
        print("Please check for syntax errors (e.g., trailing commas, unmatched brackets).", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        result = MotorHeatBudget(config).run()
        print(format_report(result), end='')
        if verbose:
            print(format_diagnostics(result))

        if sweep is not None:
            velocities = create_velocity_range(*sweep)
            sweep_df = sweep_freestream_velocity(config, velocities)
            with pd.option_context('display.float_format', '{:.2f}'.format):
                print(sweep_df.to_string(index=False))
            if plot:
                plot_velocity_sweep(sweep_df)

    except (TypeError, KeyError) as e:
        print(f"Error: Invalid value or structure in configuration '{config_path}'.", file=sys.stderr)
        print(f"Details: {e}", file=sys.stderr)
        print("Please ensure every setting is a number and the config file has the correct structure.", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    return result


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Compute the heat dissipation budget of a motor on Mars."
    )
    parser.add_argument(
        'config_file',
        type=str,
        nargs='?',
        default=None,
        help="Path to a JSON configuration file (default: built-in reference case)"
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help="Print intermediate values (powers, h, Re, Nu, free convection)"
    )
    parser.add_argument(
        '--sweep',
        type=float,
        nargs=3,
        metavar=('V_MIN', 'V_MAX', 'V_STEP'),
        help="Sweep the freestream velocity (m/s) and print a table"
    )
    parser.add_argument(
        '--plot',
        action='store_true',
        help="Plot the velocity sweep (requires --sweep)"
    )

    args = parser.parse_args(argv)
    if args.plot and args.sweep is None:
        parser.error("--plot requires --sweep")

    return run_budget_from_config(args.config_file, verbose=args.verbose, sweep=args.sweep, plot=args.plot)


if __name__ == '__main__':
    main()
