# -*- coding: utf-8 -*-
"""Tests for :class:`dynatune.optimization.hyper_parameter_space.HyperParameterSpace`."""
import numpy

import pytest

from dynatune.geometry_utils import ClosedInterval
from dynatune.optimization.hyper_parameter_space import HyperParameterSpace
from dynatune.tests.tuning_test_case import TuningTestCase


class TestHyperParameterSpace(TuningTestCase):

    """Test the conversions between configurations and points, in linear and log scale."""

    def test_linear_scale(self):
        """Check that points are the values, in the order of the hyper-parameters."""
        space = HyperParameterSpace(['b', 'a'])
        assert space.dim == 2
        assert space.domain is None

        point = space.to_point({'a': 1.0, 'b': 2.0, 'unused': 3.0})
        self.assert_vector_within_relative(point, numpy.array([2.0, 1.0]), 0.0)
        assert space.to_config(point) == {'a': 1.0, 'b': 2.0}
        assert all(isinstance(value, float) for value in space.to_config(point).values())

    def test_log_scale(self):
        """Check that points are the logarithms of the values."""
        space = HyperParameterSpace.from_config({'lr': 0.1}, log_scale=True)
        point = space.to_point({'lr': 0.1})
        self.assert_vector_within_relative(point, numpy.log([0.1]), 0.0)
        self.assert_configs_within_relative(space.to_config(point), {'lr': 0.1}, 1.0e-14)

        with pytest.raises(ValueError):
            space.to_point({'lr': 0.0})

    def test_domain_bounds(self):
        """Check that bounds are stored in search coordinates and points are restricted to them."""
        space = HyperParameterSpace(['a', 'b'], domain_bounds={'a': [-1.0, 1.0], 'b': ClosedInterval(0.0, 2.0)})
        assert space.domain.get_bounding_box() == [ClosedInterval(-1.0, 1.0), ClosedInterval(0.0, 2.0)]
        self.assert_vector_within_relative(space.restrict(numpy.array([3.0, 1.0])), numpy.array([1.0, 1.0]), 0.0)

        log_space = HyperParameterSpace(['lr'], domain_bounds={'lr': [1.0e-3, 1.0]}, log_scale=True)
        bounding_box = log_space.domain.get_bounding_box()
        self.assert_scalar_within_relative(bounding_box[0].min, numpy.log(1.0e-3), 1.0e-14)
        self.assert_scalar_within_absolute(bounding_box[0].max, 0.0, 0.0)

    def test_invalid_domain_bounds(self):
        """Check that missing, empty, or (in log scale) non-positive bounds are rejected."""
        with pytest.raises(ValueError):
            HyperParameterSpace(['a', 'b'], domain_bounds={'a': [0.0, 1.0]})
        with pytest.raises(ValueError):
            HyperParameterSpace(['a'], domain_bounds={'a': [1.0, 0.0]})
        with pytest.raises(ValueError):
            HyperParameterSpace(['a'], domain_bounds={'a': [0.0, 1.0]}, log_scale=True)

    def test_unbounded_restrict(self):
        """Check that an unbounded space leaves points unchanged."""
        space = HyperParameterSpace(['a'])
        self.assert_vector_within_relative(space.restrict(numpy.array([1.0e9])), numpy.array([1.0e9]), 0.0)

    def test_generate_grid(self):
        """Check the grid values along each axis, with the initial configuration first."""
        space = HyperParameterSpace(['a', 'b'])
        grid = space.generate_grid({'a': 0.0, 'b': 10.0}, 2, 0.5)
        truth = numpy.array([[0.0, 10.0], [0.0, 10.5], [0.5, 10.0], [0.5, 10.5]])
        self.assert_vector_within_relative(grid, truth, 0.0)

    def test_generate_grid_log_scale_bounded(self):
        """Check that log scale grids are geometric and projected into the domain."""
        space = HyperParameterSpace(['lr'], domain_bounds={'lr': [1.0e-3, 0.5]}, log_scale=True)
        grid = space.generate_grid({'lr': 0.01}, 3, numpy.log(10.0))
        configs = [space.to_config(point)['lr'] for point in grid]
        self.assert_vector_within_relative(numpy.array(configs), numpy.array([0.01, 0.1, 0.5]), 1.0e-12)
