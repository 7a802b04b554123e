# -*- coding: utf-8 -*-
"""Tests for the fitness functions of :mod:`dynatune.models.fitness`."""
import numpy

from dynatune.models.fitness import mean_absolute_error, mean_squared_error, root_mean_squared_error
from dynatune.tests.tuning_test_case import TuningTestCase


class TestFitness(TuningTestCase):

    """Test the fitness functions on predictions with known errors."""

    def test_fitness(self):
        """Check mse, rmse and mae, for vector and matrix shaped predictions."""
        predictions = numpy.array([1.0, 2.0, 3.0, 4.0])
        targets = numpy.array([1.0, 0.0, 3.0, 6.0])

        self.assert_scalar_within_relative(mean_squared_error(predictions, targets), 2.0, 1.0e-14)
        self.assert_scalar_within_relative(root_mean_squared_error(predictions, targets), numpy.sqrt(2.0), 1.0e-14)
        self.assert_scalar_within_relative(mean_absolute_error(predictions, targets), 1.0, 1.0e-14)

        self.assert_scalar_within_relative(mean_squared_error(predictions.reshape(2, 2), targets.reshape(2, 2)), 2.0, 1.0e-14)
        assert isinstance(mean_squared_error(predictions, targets), float)

    def test_perfect_fit(self):
        """Check that exact predictions have zero error."""
        values = [0.5, -1.5]
        assert mean_squared_error(values, values) == 0.0
        assert root_mean_squared_error(values, values) == 0.0
        assert mean_absolute_error(values, values) == 0.0
