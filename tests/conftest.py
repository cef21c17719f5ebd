import copy
import math

import matplotlib
matplotlib.use('Agg')

import pytest

from constants import REFERENCE_FLIGHT_CONFIG


@pytest.fixture
def reference_config():
    return copy.deepcopy(REFERENCE_FLIGHT_CONFIG)


def hand_calculation(T_motor=50, T_mars=-50, t=10 * 60, v_freestream=40, v_down=40,
                     sigma=5.67e-8, c_p=730, rho=0.0139, k=0.0096, mu=1.422e-5,
                     epsilon=0.98, P_rotor=5578, eta=0.85, m=0.75, c_motor=100,
                     r=0.05, l=0.2):
    """Straight transcription of the motor heat budget, used as the oracle."""
    deltaT = T_motor - T_mars
    T_mars = T_mars + 273.15
    T_motor = T_motor + 273.15

    A_noFin = (2 * math.pi * r * l + 2 * math.pi * r**2)

    P_dis = (P_rotor / eta) * (1 - eta)
    P_accum = m * c_motor * deltaT / t
    P_rad = epsilon * sigma * A_noFin * (T_motor**4 - T_mars**4)
    Q_dot_req = P_dis - P_accum - P_rad
    h_reqNoFin = Q_dot_req / (A_noFin * deltaT)

    Pr = mu * c_p / k

    Re1 = rho * v_freestream * 2 * r / mu
    Nu1 = 0.3 + (0.62 * math.sqrt(Re1) * Pr**(1/3) / (1 + (0.4/Pr)**(2/3))**(1/4)) * \
        (1 + (Re1/282000)**(5/8))**(4/5)
    h_across = Nu1 * k / (2 * r)
    Q_dot_across = h_across * A_noFin * deltaT

    Re2 = rho * v_down * l / mu
    Nu2 = 0.664 * Re2**0.5 * Pr**(1/3)
    h_down = Nu2 * k / l
    Q_dot_down = h_down * A_noFin * deltaT

    return {
        'A_noFin': A_noFin, 'P_dis': P_dis, 'P_accum': P_accum, 'P_rad': P_rad,
        'Q_dot_req': Q_dot_req, 'h_reqNoFin': h_reqNoFin, 'Pr': Pr,
        'Re1': Re1, 'Nu1': Nu1, 'h_across': h_across, 'Q_dot_across': Q_dot_across,
        'Re2': Re2, 'Nu2': Nu2, 'h_down': h_down, 'Q_dot_down': Q_dot_down,
    }


@pytest.fixture
def hand_calc():
    return hand_calculation


@pytest.fixture
def reference_values():
    return hand_calculation()
