# -*- coding: utf-8 -*-
"""Tensor product domains bounding the hyper-parameter space explored by the optimizers in :mod:`dynatune.optimization`.

The domain provides functions to:

* Check whether a point is inside/outside
* Generate random points inside
* Project a point (e.g., a mutated annealing state) back inside

"""
import copy

import numpy

from dynatune.geometry_utils import generate_latin_hypercube_points


class TensorProductDomain(object):

    r"""Domain type for a tensor product domain.

    A d-dimensional tensor product domain is ``D = [x_0_{min}, x_0_{max}] X [x_1_{min}, x_1_{max}] X ... X [x_d_{min}, x_d_{max}]``

    """

    def __init__(self, domain_bounds):
        """Construct a TensorProductDomain with the specified bounds.

        :param domain_bounds: the boundaries of a dim-dimensional tensor-product domain
        :type domain_bounds: iterable of dim :class:`dynatune.geometry_utils.ClosedInterval`
        :raises: ValueError: if any of the intervals is empty

        """
        self._domain_bounds = copy.deepcopy(list(domain_bounds))

        for interval in self._domain_bounds:
            if interval.is_empty():
                raise ValueError('Tensor product region is EMPTY.')

    @property
    def dim(self):
        """Return the number of spatial dimensions."""
        return len(self._domain_bounds)

    def check_point_inside(self, point):
        r"""Check if a point is inside the domain/on its boundary or outside.

        :param point: point to check
        :type point: array of float64 with shape (dim)
        :return: true if point is inside the domain
        :rtype: bool

        """
        return all(interval.is_inside(point[i]) for i, interval in enumerate(self._domain_bounds))

    def get_bounding_box(self):
        """Return a list of ClosedIntervals representing a bounding box for this domain."""
        return copy.copy(self._domain_bounds)

    def generate_uniform_random_points_in_domain(self, num_points, random_state=None):
        r"""Generate ``num_points`` on a latin-hypercube (i.e., like a checkerboard).

        See :func:`dynatune.geometry_utils.generate_latin_hypercube_points` for more details.

        :param num_points: max number of points to generate
        :type num_points: int >= 0
        :param random_state: source of randomness; None for the global numpy.random state
        :type random_state: numpy.random.RandomState
        :return: uniform random sampling of points from the domain
        :rtype: array of float64 with shape (num_points, dim)

        """
        return generate_latin_hypercube_points(num_points, self._domain_bounds, random_state=random_state)

    def restrict_point_to_domain(self, point):
        """Project ``point`` to the nearest point of the domain.

        Since all boundary planes are axis-aligned, projecting is a per-coordinate clip.

        :param point: point to project
        :type point: array of float64 with shape (dim)
        :return: projected point; equal to ``point`` if it is already inside
        :rtype: array of float64 with shape (dim)

        """
        lower = numpy.array([interval.min for interval in self._domain_bounds])
        upper = numpy.array([interval.max for interval in self._domain_bounds])
        return numpy.clip(numpy.asarray(point, dtype=numpy.float64), lower, upper)
