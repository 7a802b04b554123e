# -*- coding: utf-8 -*-
"""Architectures for :class:`dynatune.models.linear.LinearModel`: feature maps from inputs (n, input_dim) to features (n, num_features)."""
import numpy


def identity():
    """Return the architecture using the inputs as features."""
    def architecture(inputs):
        """Return ``inputs`` unchanged."""
        return inputs

    return architecture


def polynomial(degree):
    """Return the architecture with features ``x, x^2, ..., x^degree`` for every input column (no cross terms).

    :param degree: highest power; a float (e.g., straight from a configuration) is rounded
    :type degree: int >= 1
    :raises: ValueError: if ``degree`` is below 1

    """
    degree = int(round(degree))
    if degree < 1:
        raise ValueError('degree = {0:d} must be at least 1.'.format(degree))

    def architecture(inputs):
        """Return the powers of ``inputs`` stacked column-wise: all columns to the 1st power, then the 2nd, etc."""
        return numpy.hstack([numpy.power(inputs, power) for power in range(1, degree + 1)])

    return architecture


def with_bias(architecture):
    """Return ``architecture`` with a leading column of ones (an intercept) added to its features."""
    def biased_architecture(inputs):
        """Return the features of ``architecture`` after a column of ones."""
        features = architecture(inputs)
        return numpy.hstack([numpy.ones((features.shape[0], 1)), features])

    return biased_architecture
