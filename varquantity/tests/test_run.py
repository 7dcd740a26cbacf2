"""
Test varquantity Model Runner
=============================
"""

import pytest


MODEL_YAML = """
factors: [1.2 T, 20 Hz]
quantities:
  core_losses:
    type: Power
    value:
      type: Polynomial
      coefficients: [1000 W/T^2, 0 W/T, 0 W]
  resistance:
    type: ElectricalResistance
    value: 2 mohm
"""


def test_list(capsys):
    """--list prints function and quantity types."""
    from varquantity.run import main

    assert main(['--list']) == 0

    out = capsys.readouterr().out
    assert 'Polynomial' in out
    assert 'ClampedQuantity' in out
    assert 'MagneticFluxDensity' in out


def test_evaluate_model(tmp_path, capsys):
    """Quantities are evaluated with the file's factors."""
    from varquantity.run import main

    path = tmp_path / 'model.yaml'
    path.write_text(MODEL_YAML)

    assert main(['--config', str(path)]) == 0

    out = capsys.readouterr().out
    assert 'core_losses' in out
    assert '1440.0' in out
    assert '[FAIL]' not in out


def test_factor_override(tmp_path, capsys):
    """--factor replaces the file's factors."""
    from varquantity.run import main

    path = tmp_path / 'model.yaml'
    path.write_text(MODEL_YAML)

    assert main(['--config', str(path), '--factor', '2 T']) == 0

    out = capsys.readouterr().out
    assert '4000.0' in out


def test_unit_mismatch_exit_status(tmp_path, capsys):
    """A function changing its output unit gives exit status 1."""
    from varquantity.run import main
    from varquantity.function import QuantityFunction, register_function
    from varquantity.units import Q

    @register_function(tag='SwitchesUnitOnFactors')
    class SwitchesUnitOnFactors(QuantityFunction):
        def call(self, influencing_factors):
            return Q("1 J") if influencing_factors else Q("1 W")

        def to_dict(self):
            return {}

    path = tmp_path / 'model.yaml'
    path.write_text(
        "quantities:\n"
        "  broken:\n"
        "    type: Power\n"
        "    value:\n"
        "      type: SwitchesUnitOnFactors\n"
    )

    assert main(['--config', str(path), '--factor', '1 T']) == 1

    out = capsys.readouterr().out
    assert '[FAIL]' in out
    assert 'broken' in out


def test_configuration_error(tmp_path, capsys):
    """Invalid model files are reported on stderr."""
    from varquantity.run import main

    path = tmp_path / 'model.yaml'
    path.write_text("factors: [1 T]\n")

    assert main(['--config', str(path)]) == 1
    assert 'CONFIGURATION ERROR' in capsys.readouterr().err


def test_config_required():
    """--config is required without --list."""
    from varquantity.run import main

    with pytest.raises(SystemExit):
        main([])


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
