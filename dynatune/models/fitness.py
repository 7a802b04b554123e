# -*- coding: utf-8 -*-
"""Fitness functions for :class:`dynatune.tunable_model.TunableModel`: ``fitness(predictions, targets)``, lesser is better."""
import numpy


def mean_squared_error(predictions, targets):
    """Return the mean over all entries of ``(predictions - targets)^2``."""
    residuals = numpy.asarray(predictions, dtype=numpy.float64) - numpy.asarray(targets, dtype=numpy.float64)
    return float(numpy.mean(residuals * residuals))


def root_mean_squared_error(predictions, targets):
    """Return the square root of :func:`mean_squared_error`."""
    return float(numpy.sqrt(mean_squared_error(predictions, targets)))


def mean_absolute_error(predictions, targets):
    """Return the mean over all entries of ``|predictions - targets|``."""
    residuals = numpy.asarray(predictions, dtype=numpy.float64) - numpy.asarray(targets, dtype=numpy.float64)
    return float(numpy.mean(numpy.fabs(residuals)))
