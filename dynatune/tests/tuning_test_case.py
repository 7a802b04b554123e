# -*- coding: utf-8 -*-
"""Base test case class for dynatune tests; includes some additional asserts for numerical tests."""
import logging

import numpy

import pytest


class TuningTestCase(object):

    """Base test case for dynatune.

    This includes extra asserts for checking relative differences of floating point scalars/vectors and
    a fixture silencing logging for tests that exercise failing trainings.

    """

    @pytest.fixture()
    def disable_logging(self, request):
        """Disable logging (for the duration of this test case)."""
        logging.disable(logging.CRITICAL)

        def finalize():
            """Re-enable logging (so other test cases are unaffected)."""
            logging.disable(logging.NOTSET)
        request.addfinalizer(finalize)

    @staticmethod
    def assert_scalar_within_absolute(value, truth, tol):
        """Check whether a scalar ``value`` is equal to ``truth``: ``|value - truth| <= tol``.

        :param value: scalar to check
        :type value: float64
        :param truth: exact/desired result
        :type value: float64
        :param tol: max permissible absolute difference
        :type tol: float64
        :raise: AssertionError value, truth are not equal to within tolerance

        """
        __tracebackhide__ = True
        diff = numpy.fabs(value - truth)
        assert diff <= tol, 'value = {0:.18E}, truth = {1:.18E}, diff = {2:.18E}, tol = {3:.18E}'.format(value, truth, diff, tol)

    @staticmethod
    def assert_scalar_within_relative(value, truth, tol):
        """Check whether a scalar ``value`` is relatively equal to ``truth``: ``|value - truth|/|truth| <= tol``.

        :param value: scalar to check
        :type value: float64
        :param truth: exact/desired result
        :type value: float64
        :param tol: max permissible relative difference
        :type tol: float64
        :raise: AssertionError value, truth are not relatively equal

        """
        __tracebackhide__ = True
        denom = numpy.fabs(truth)
        if denom < numpy.finfo(numpy.float64).tiny:
            denom = 1.0  # do not divide by 0
        diff = numpy.fabs((value - truth) / denom)
        assert diff <= tol, 'value = {0:.18E}, truth = {1:.18E}, diff = {2:.18E}, tol = {3:.18E}'.format(value, truth, diff, tol)

    @staticmethod
    def assert_vector_within_relative(value, truth, tol):
        """Check whether a vector is element-wise relatively equal to ``truth``: ``|value[i] - truth[i]|/|truth[i]| <= tol``.

        :param value: vector to check
        :type value: array of float64 with arbitrary shape
        :param truth: exact/desired vector result
        :type value: array of float64 with shape matching ``value``
        :param tol: max permissible relative difference
        :type tol: float64
        :raise: AssertionError value[i], truth[i] are not relatively equal for every i

        """
        __tracebackhide__ = True
        value = numpy.asarray(value)
        truth = numpy.asarray(truth)
        assert value.shape == truth.shape, 'value.shape = {0} != truth.shape = {1}'.format(value.shape, truth.shape)
        for index in numpy.ndindex(value.shape):
            TuningTestCase.assert_scalar_within_relative(value[index], truth[index], tol)

    @staticmethod
    def assert_configs_within_relative(value, truth, tol):
        """Check whether two configurations have the same keys and relatively equal values.

        :param value: configuration to check
        :type value: dict of str -> float64
        :param truth: exact/desired configuration
        :type truth: dict of str -> float64
        :param tol: max permissible relative difference
        :type tol: float64
        :raise: AssertionError if keys differ or some values are not relatively equal

        """
        __tracebackhide__ = True
        assert sorted(value) == sorted(truth), 'keys {0} != {1}'.format(sorted(value), sorted(truth))
        for key in truth:
            TuningTestCase.assert_scalar_within_relative(value[key], truth[key], tol)
