# -*- coding: utf-8 -*-
"""Geometry utilities. e.g., ClosedInterval, grid and latin hypercube point generation."""
import collections

import numpy


def generate_latin_hypercube_points(num_points, domain_bounds, random_state=None):
    """Compute a set of random points inside some domain that lie in a latin hypercube.

    In 2D, a latin hypercube is a latin square--a checkerboard--such that there is exactly one sample in
    each row and each column.  This notion is generalized for higher dimensions where each dimensional
    'slice' has precisely one sample.

    See wikipedia: http://en.wikipedia.org/wiki/Latin_hypercube_sampling
    for more details on the latin hypercube sampling process.

    :param num_points: number of random points to generate
    :type num_points: int >= 0
    :param domain_bounds: [min, max] boundaries of the hypercube in each dimension
    :type domain_bounds: list of dim ClosedInterval
    :param random_state: source of randomness; None for the global numpy.random state
    :type random_state: numpy.random.RandomState
    :return: uniformly distributed random points inside the specified hypercube
    :rtype: array of float64 with shape (num_points, dim)

    """
    if random_state is None:
        random_state = numpy.random

    points = numpy.zeros((num_points, len(domain_bounds)), dtype=numpy.float64)
    if num_points == 0:
        return points

    for i, interval in enumerate(domain_bounds):
        # Cut the range into num_points slices
        subcube_edge_length = interval.length / float(num_points)

        # Create random ordering for slices
        ordering = numpy.arange(num_points)
        random_state.shuffle(ordering)

        for j in range(num_points):
            point_base = interval.min + subcube_edge_length * ordering[j]
            points[j, i] = point_base + random_state.uniform(0.0, subcube_edge_length)

    return points


def generate_axis_grid_points(per_axis_values):
    r"""Generate the cartesian product of per-axis values; exponential runtime.

    .. Note:: This operation is like an outer-product, so 4 values per axis in 10 dimensions produces
        4^{10} points. Every point of a tuning grid costs a model training, so the point generation is
        never the limiting factor.

    The last axis varies fastest: ``[[0, 1], [5, 6]]`` yields ``[[0, 5], [0, 6], [1, 5], [1, 6]]``.

    :param per_axis_values: the values taken along each axis
    :type per_axis_values: list of dim iterables of float64
    :return: grid point coordinates
    :rtype: array of float64 with shape (\Pi_i n_i, dim)

    """
    per_axis_values = [numpy.asarray(values, dtype=numpy.float64) for values in per_axis_values]
    if not per_axis_values or any(values.size == 0 for values in per_axis_values):
        return numpy.empty((0, len(per_axis_values)))

    # meshgrid produces a list of ndarray that is used to evaluate functions on a grid.
    # The i-th output array has the coordinate of *every* grid point in the i-th dimension.
    mesh_grid = numpy.meshgrid(*per_axis_values, indexing='ij')
    return numpy.vstack([numpy.ravel(axis) for axis in mesh_grid]).T


# See ClosedInterval (below) for docstring.
_BaseClosedInterval = collections.namedtuple('ClosedInterval', ['min', 'max'])


class ClosedInterval(_BaseClosedInterval):

    r"""Container to represent the mathematical notion of a closed interval, commonly written [a,b].

    The closed interval [a,b] is the set of all numbers x such that a <= x <= b.
    Note that "closed" here indicates the interval *includes* both endpoints.
    An interval with a > b is considered empty.

    :ivar min: (*float64*) the "left" bound of the domain, ``a``
    :ivar max: (*float64*) the "right" bound of the domain, ``b``

    """

    __slots__ = ()

    @property
    def length(self):
        """Compute the length of this ClosedInterval."""
        return self.max - self.min

    def is_inside(self, value):
        """Check if a value is inside this ClosedInterval."""
        return self.min <= value <= self.max

    def is_empty(self):
        """Check whether this ClosedInterval is the emptyset: max < min."""
        return self.max < self.min
