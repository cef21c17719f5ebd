import pytest

from constants import ACROSS_CYLINDER, DOWN_CYLINDER, DEFAULT_CONVECTION_MODELS
from environment import create_environment
from forced_convection import ForcedConvectionAlgorithm, heat_transfer_rate
from motor import create_motor


@pytest.fixture
def motor(reference_config):
    return create_motor(reference_config)


@pytest.fixture
def env(reference_config):
    return create_environment(reference_config)


def test_churchill_bernstein_across_cylinder(motor, env, reference_values):
    algorithm = ForcedConvectionAlgorithm(DEFAULT_CONVECTION_MODELS)
    result = algorithm.calculate_h(ACROSS_CYLINDER, motor, env, 40.0)

    assert result.model == 'ChurchillBernstein'
    assert result.characteristic_length_m == pytest.approx(0.1)
    assert result.reynolds == pytest.approx(reference_values['Re1'], rel=1e-12)
    assert result.nusselt == pytest.approx(reference_values['Nu1'], rel=1e-9)
    assert result.h == pytest.approx(reference_values['h_across'], rel=1e-9)


def test_laminar_flat_plate_down_cylinder(motor, env, reference_values):
    algorithm = ForcedConvectionAlgorithm(DEFAULT_CONVECTION_MODELS)
    result = algorithm.calculate_h(DOWN_CYLINDER, motor, env, 40.0)

    assert result.model == 'LaminarFlatPlate'
    assert result.characteristic_length_m == pytest.approx(0.2)
    assert result.reynolds == pytest.approx(reference_values['Re2'], rel=1e-12)
    assert result.nusselt == pytest.approx(reference_values['Nu2'], rel=1e-9)
    assert result.h == pytest.approx(reference_values['h_down'], rel=1e-9)


def test_hilpert_band_selection(motor, env):
    algorithm = ForcedConvectionAlgorithm({ACROSS_CYLINDER: 'Hilpert'})
    result = algorithm.calculate_h(ACROSS_CYLINDER, motor, env, 40.0)

    # Re ~ 3910 sits in the 40 - 4000 band: C = 0.683, m = 0.466
    assert 40 < result.reynolds < 4000
    expected = 0.683 * result.reynolds**0.466 * result.prandtl**(1/3)
    assert result.nusselt == pytest.approx(expected)


def test_hilpert_close_to_churchill_bernstein(motor, env):
    hilpert = ForcedConvectionAlgorithm({ACROSS_CYLINDER: 'Hilpert'})
    cb = ForcedConvectionAlgorithm({ACROSS_CYLINDER: 'ChurchillBernstein'})
    h_hilpert = hilpert.calculate_h(ACROSS_CYLINDER, motor, env, 40.0).h
    h_cb = cb.calculate_h(ACROSS_CYLINDER, motor, env, 40.0).h
    assert h_hilpert == pytest.approx(h_cb, rel=0.25)


def test_hilpert_out_of_range_raises(motor, env):
    algorithm = ForcedConvectionAlgorithm({ACROSS_CYLINDER: 'Hilpert'})
    with pytest.raises(ValueError, match="Hilpert"):
        algorithm.calculate_h(ACROSS_CYLINDER, motor, env, 1e-4)


def test_mixed_flat_plate_matches_laminar_below_transition(motor, env):
    laminar = ForcedConvectionAlgorithm({DOWN_CYLINDER: 'LaminarFlatPlate'})
    mixed = ForcedConvectionAlgorithm({DOWN_CYLINDER: 'MixedFlatPlate'})
    assert mixed.calculate_h(DOWN_CYLINDER, motor, env, 40.0).h == \
        pytest.approx(laminar.calculate_h(DOWN_CYLINDER, motor, env, 40.0).h)


def test_mixed_flat_plate_turbulent_branch(motor, env):
    algorithm = ForcedConvectionAlgorithm({DOWN_CYLINDER: 'MixedFlatPlate'})
    result = algorithm.calculate_h(DOWN_CYLINDER, motor, env, 4000.0)
    assert result.reynolds > 5e5
    expected = (0.037 * result.reynolds**0.8 - 871) * result.prandtl**(1/3)
    assert result.nusselt == pytest.approx(expected)


def test_unassigned_flow_case_raises(motor, env):
    algorithm = ForcedConvectionAlgorithm({ACROSS_CYLINDER: 'ChurchillBernstein'})
    with pytest.raises(ValueError, match="No forced convection model assigned"):
        algorithm.calculate_h(DOWN_CYLINDER, motor, env, 40.0)


def test_unknown_model_raises(motor, env):
    algorithm = ForcedConvectionAlgorithm({ACROSS_CYLINDER: 'Zukauskas'})
    with pytest.raises(ValueError, match="Unknown forced convection model"):
        algorithm.calculate_h(ACROSS_CYLINDER, motor, env, 40.0)


def test_invalid_flow_case_raises(motor, env):
    algorithm = ForcedConvectionAlgorithm({'Sideways': 'ChurchillBernstein'})
    with pytest.raises(ValueError, match="Invalid flow case"):
        algorithm.calculate_h('Sideways', motor, env, 40.0)


@pytest.mark.parametrize("flow_case", [ACROSS_CYLINDER, DOWN_CYLINDER])
def test_h_increases_with_velocity(motor, env, flow_case):
    algorithm = ForcedConvectionAlgorithm(DEFAULT_CONVECTION_MODELS)
    slow = algorithm.calculate_h(flow_case, motor, env, 20.0)
    fast = algorithm.calculate_h(flow_case, motor, env, 60.0)
    assert fast.reynolds > slow.reynolds
    assert fast.nusselt > slow.nusselt
    assert fast.h > slow.h


def test_heat_transfer_rate():
    assert heat_transfer_rate(2.0, 0.5, 100.0) == pytest.approx(100.0)
