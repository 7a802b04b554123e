# -*- coding: utf-8 -*-
"""Tests for the colander schemas in :mod:`dynatune.schemas`."""
import colander

import pytest

from dynatune.constant import CSA_SA, DEFAULT_COUPLED_SIMULATED_ANNEALING_PARAMETERS, DEFAULT_GRID_SEARCH_PARAMETERS, DEFAULT_LBFGSB_PARAMETERS, DEFAULT_RANDOM_SEARCH_PARAMETERS
from dynatune.schemas import CoupledSimulatedAnnealingParametersSchema, GridSearchParametersSchema, LBFGSBParametersSchema, PositiveFloat, RandomSearchParametersSchema, StateRecordSchema
from dynatune.tests.tuning_test_case import TuningTestCase


class TestOptimizerParametersSchemas(TuningTestCase):

    """Test deserialization of optimizer parameters: defaults, conversion and rejection of bad input."""

    def test_defaults(self):
        """Check that an empty dict deserializes to the defaults."""
        schemas_and_defaults = [
            (GridSearchParametersSchema(), DEFAULT_GRID_SEARCH_PARAMETERS),
            (RandomSearchParametersSchema(), DEFAULT_RANDOM_SEARCH_PARAMETERS),
            (CoupledSimulatedAnnealingParametersSchema(), DEFAULT_COUPLED_SIMULATED_ANNEALING_PARAMETERS),
            (LBFGSBParametersSchema(), DEFAULT_LBFGSB_PARAMETERS),
        ]
        for schema, defaults in schemas_and_defaults:
            assert schema.deserialize({}) == defaults._asdict()

    def test_conversion(self):
        """Check that given values are converted to the declared types."""
        params = GridSearchParametersSchema().deserialize({'grid_size': '4', 'step_size': '0.5', 'log_scale': 'true'})
        assert params == {'grid_size': 4, 'step_size': 0.5, 'log_scale': True}

        params = CoupledSimulatedAnnealingParametersSchema().deserialize({'variant': CSA_SA, 'max_iterations': 0})
        assert params['variant'] == CSA_SA
        assert params['max_iterations'] == 0

    def test_invalid(self):
        """Check that unknown keys and out of range values are rejected."""
        invalid_inputs = [
            (GridSearchParametersSchema(), {'grid_size': 0}),
            (GridSearchParametersSchema(), {'step_size': -1.0}),
            (GridSearchParametersSchema(), {'num_samples': 3}),
            (RandomSearchParametersSchema(), {'num_samples': 0}),
            (CoupledSimulatedAnnealingParametersSchema(), {'variant': 'CSA-XYZ'}),
            (CoupledSimulatedAnnealingParametersSchema(), {'acceptance_temperature': 0.0}),
            (CoupledSimulatedAnnealingParametersSchema(), {'max_iterations': -1}),
            (LBFGSBParametersSchema(), {'factr': 0.5}),
            (LBFGSBParametersSchema(), {'approx_grad': True}),
        ]
        for schema, params in invalid_inputs:
            with pytest.raises(colander.Invalid):
                schema.deserialize(params)

    def test_positive_float(self):
        """Check that PositiveFloat rejects zero, negative and infinite values."""
        node = PositiveFloat()
        assert node.deserialize('2.5') == 2.5
        for value in ('0.0', '-1.0', 'inf'):
            with pytest.raises(colander.Invalid):
                node.deserialize(value)


class TestStateRecordSchema(TuningTestCase):

    """Test the validation of state file contents."""

    def test_valid(self):
        """Check that hyper-parameter keys are preserved and the comment defaults to empty."""
        record = StateRecordSchema().deserialize({'lr': 0.1, 'depth': 3, 'energy': 0.5})
        assert record == {'lr': 0.1, 'depth': 3, 'energy': 0.5, 'comment': ''}

    def test_infinite_energy(self):
        """Check that failed trainings (infinite energy) are valid records."""
        record = StateRecordSchema().deserialize({'lr': 0.1, 'energy': float('inf'), 'comment': 'diverged'})
        assert record['energy'] == float('inf')
        assert record['comment'] == 'diverged'

    def test_invalid(self):
        """Check that a missing energy and non-numeric hyper-parameters are rejected."""
        for cstruct in ({'lr': 0.1}, {'lr': None, 'energy': 1.0}, {'lr': [1.0], 'energy': 1.0}, {'lr': False, 'energy': 1.0}):
            with pytest.raises(colander.Invalid):
                StateRecordSchema().deserialize(cstruct)
