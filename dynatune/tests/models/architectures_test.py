# -*- coding: utf-8 -*-
"""Tests for the feature maps of :mod:`dynatune.models.architectures`."""
import numpy

import pytest

from dynatune.models.architectures import identity, polynomial, with_bias
from dynatune.tests.tuning_test_case import TuningTestCase


class TestArchitectures(TuningTestCase):

    """Test identity, polynomial and biased features."""

    @classmethod
    @pytest.fixture(autouse=True, scope='class')
    def base_setup(cls):
        """Set up 3 inputs of dimension 2."""
        cls.inputs = numpy.array([[1.0, 2.0], [3.0, -1.0], [0.5, 0.0]])

    def test_identity(self):
        """Check that the inputs are the features."""
        self.assert_vector_within_relative(identity()(self.inputs), self.inputs, 0.0)

    def test_polynomial(self):
        """Check that powers are stacked column-wise, lowest first, and that float degrees are rounded."""
        truth = numpy.hstack([self.inputs, self.inputs ** 2, self.inputs ** 3])
        self.assert_vector_within_relative(polynomial(3)(self.inputs), truth, 0.0)
        self.assert_vector_within_relative(polynomial(2.9)(self.inputs), truth, 0.0)
        self.assert_vector_within_relative(polynomial(1)(self.inputs), self.inputs, 0.0)

    def test_polynomial_invalid_degree(self):
        """Check that degrees below 1 are rejected."""
        with pytest.raises(ValueError):
            polynomial(0)

    def test_with_bias(self):
        """Check that a column of ones is prepended."""
        features = with_bias(polynomial(2))(self.inputs)
        assert features.shape == (3, 5)
        self.assert_vector_within_relative(features[:, 0], numpy.ones(3), 0.0)
        self.assert_vector_within_relative(features[:, 1:], polynomial(2)(self.inputs), 0.0)
