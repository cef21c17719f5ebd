"""
Formats heat budget results for the console.
"""


def format_report(result):
    """
    Builds the three-line heat transfer summary, followed by a blank line.

    Args:
        result (HeatBudgetResult): Output of MotorHeatBudget.run().

    Returns:
        str: The report text.
    """
    return (
        f"    Required Q_dot by convection: {result.q_required:.2f} W\n"
        f"Possible Q_dot (across cylinder): {result.q_across:.2f} W\n"
        f"  Possible Q_dot (down cylinder): {result.q_down:.2f} W\n\n"
    )


def format_diagnostics(result):
    """Builds the intermediate values behind the summary."""
    req = result.required
    lines = [
        "--- Energy Balance ---",
        f"Surface area (no fins): {req.surface_area_m2:.5f} m^2",
        f"Temperature difference: {req.delta_t:.2f} K",
        f"Motor / ambient temperature: {req.motor_temp_k:.2f} K / {req.ambient_temp_k:.2f} K",
        f"Dissipated power: {req.p_dissipated:.2f} W",
        f"Accumulated power: {req.p_accumulated:.2f} W",
        f"Radiated power: {req.p_radiated:.2f} W",
        f"Required h (no fins): {req.h_required:.4f} W/m^2.K",
        "",
        "--- Forced Convection ---",
    ]
    for conv in (result.across, result.down):
        lines.append(
            f"{conv.flow_case} [{conv.model}]: v={conv.velocity_ms:.1f} m/s, "
            f"L={conv.characteristic_length_m:.3f} m, Re={conv.reynolds:.1f}, "
            f"Pr={conv.prandtl:.4f}, Nu={conv.nusselt:.3f}, h={conv.h:.4f} W/m^2.K"
        )
    nat = result.natural
    lines += [
        "",
        "--- Natural Convection ---",
        f"Gr={nat.grashof:.3e}, Ra={nat.rayleigh:.3e}, Nu={nat.nusselt:.3f}, h={nat.h:.4f} W/m^2.K",
        f"Possible Q_dot (free convection): {result.q_natural:.2f} W",
        "",
    ]
    return "\n".join(lines)
