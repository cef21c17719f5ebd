"""
Contains functions for plotting velocity sweep results.
"""
import matplotlib.pyplot as plt


def plot_velocity_sweep(sweep_df):
    """
    Generates and displays plots for a freestream velocity sweep.

    Args:
        sweep_df (pd.DataFrame): Output of sweep_freestream_velocity().

    Returns:
        matplotlib.figure.Figure: The figure that was shown.
    """
    v = sweep_df['velocity_ms']

    fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(10, 9), sharex=True)
    fig.suptitle('Motor Heat Budget vs. Flight Velocity', fontsize=16)

    # --- Plot 1: Heat transfer rates ---
    ax1.plot(v, sweep_df['q_required'], 'k--', label='Required (convection)', lw=2)
    ax1.plot(v, sweep_df['q_across'], 'r-', label='Possible (across cylinder)', lw=2)
    ax1.plot(v, sweep_df['q_down'], 'b:', label='Possible (down cylinder)', lw=2)
    ax1.set_title('Heat Transfer Rates')
    ax1.set_ylabel('Q_dot (W)')
    ax1.grid(True, linestyle=':', alpha=0.6)
    ax1.legend(loc='upper left')

    # --- Plot 2: Cross-flow coefficient ---
    ax2.plot(v, sweep_df['h_across'], 'r-', lw=2)
    ax2.set_title('Convective Coefficient Across Cylinder')
    ax2.set_ylabel('h (W/m²K)')
    ax2.set_xlabel('Freestream velocity (m/s)')
    ax2.grid(True, linestyle=':', alpha=0.6)

    plt.tight_layout(rect=[0, 0, 1, 0.96])
    plt.show()
    return fig
