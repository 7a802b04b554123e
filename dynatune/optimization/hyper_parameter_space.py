# -*- coding: utf-8 -*-
"""Conversion between hyper-parameter configurations (dicts) and the points (arrays) that optimizers move around.

Optimizers work in *search coordinates*: the hyper-parameter values themselves, or their logarithms in log scale.
In log scale a step of ``s`` multiplies a value by ``exp(s)``, which suits scale parameters (learning rates,
penalties) spanning several orders of magnitude.

"""
import numpy

from dynatune.domain import TensorProductDomain
from dynatune.geometry_utils import ClosedInterval, generate_axis_grid_points


class HyperParameterSpace(object):

    """An ordered set of hyper-parameters, with optional bounds, and the mapping between configurations and points.

    The j-th coordinate of a point is the j-th hyper-parameter of ``hyper_parameters``.

    """

    def __init__(self, hyper_parameters, domain_bounds=None, log_scale=False):
        """Construct a HyperParameterSpace.

        :param hyper_parameters: names of the hyper-parameters, in coordinate order
        :type hyper_parameters: iterable of str
        :param domain_bounds: [min, max] of every hyper-parameter (in hyper-parameter units, not log units); None
          for an unbounded space
        :type domain_bounds: dict of str -> ClosedInterval (or [min, max] pair), or None
        :param log_scale: whether search coordinates are the logarithms of the values
        :type log_scale: bool
        :raises: ValueError: if bounds are missing for a hyper-parameter or are non-positive in log scale

        """
        self.hyper_parameters = list(hyper_parameters)
        self.log_scale = log_scale
        self.domain = None

        if domain_bounds is not None:
            missing = [name for name in self.hyper_parameters if name not in domain_bounds]
            if missing:
                raise ValueError('Domain bounds missing for hyper-parameters {0}.'.format(missing))

            intervals = [ClosedInterval(*domain_bounds[name]) for name in self.hyper_parameters]
            if log_scale:
                if any(interval.min <= 0.0 for interval in intervals):
                    raise ValueError('Domain bounds must be positive in log scale, got {0}.'.format(intervals))
                intervals = [ClosedInterval(numpy.log(interval.min), numpy.log(interval.max)) for interval in intervals]
            self.domain = TensorProductDomain(intervals)

    @classmethod
    def from_config(cls, config, domain_bounds=None, log_scale=False):
        """Construct the space of the hyper-parameters of ``config``, in its key order."""
        return cls(list(config), domain_bounds=domain_bounds, log_scale=log_scale)

    @property
    def dim(self):
        """Return the number of hyper-parameters."""
        return len(self.hyper_parameters)

    def to_point(self, config):
        """Return the search coordinates of ``config``.

        :param config: a configuration holding (at least) every hyper-parameter of this space
        :type config: dict of str -> float64
        :rtype: array of float64 with shape (dim)
        :raises: ValueError: if a value is non-positive in log scale

        """
        values = numpy.array([config[name] for name in self.hyper_parameters], dtype=numpy.float64)
        if not self.log_scale:
            return values

        if numpy.any(values <= 0.0):
            raise ValueError('Hyper-parameter values must be positive in log scale, got {0}.'.format(dict(config)))
        return numpy.log(values)

    def to_config(self, point):
        """Return the configuration at search coordinates ``point``.

        :param point: search coordinates
        :type point: array of float64 with shape (dim)
        :rtype: dict of str -> float

        """
        values = numpy.exp(point) if self.log_scale else numpy.asarray(point)
        return dict((name, float(value)) for name, value in zip(self.hyper_parameters, values))

    def restrict(self, point):
        """Return the point of the domain nearest to ``point``; ``point`` itself for an unbounded space."""
        if self.domain is None:
            return numpy.array(point, dtype=numpy.float64)
        return self.domain.restrict_point_to_domain(point)

    def generate_grid(self, initial_config, grid_size, step_size):
        r"""Generate the grid anchored at ``initial_config``, with ``grid_size`` values per axis spaced by ``step_size``.

        Along axis j the values are ``x_j + step_size * i`` for ``i = 0, ..., grid_size - 1``, where ``x_j`` is the
        search coordinate of ``initial_config``; so in log scale the values are ``h_j * exp(step_size * i)``.
        Points are projected into the domain if this space is bounded (duplicates may then appear).

        :return: grid points in search coordinates, ``initial_config`` first
        :rtype: array of float64 with shape (grid_size^{dim}, dim)

        """
        start = self.to_point(initial_config)
        offsets = step_size * numpy.arange(grid_size)
        points = generate_axis_grid_points([start[j] + offsets for j in range(self.dim)])
        return numpy.array([self.restrict(point) for point in points]).reshape(points.shape)
