# -*- coding: utf-8 -*-
"""Shared machinery of the global optimizers: evaluating energy landscapes and persisting the optimum."""
import logging

import numpy

from dynatune.interfaces.global_optimizer_interface import GlobalOptimizerInterface


def energy_landscape(system, configs, options=None):
    """Evaluate the energy of every configuration of ``configs``, in order.

    :param system: the system being tuned
    :type system: :class:`dynatune.interfaces.globally_optimizable_interface.GloballyOptimizableInterface`
    :param configs: configurations to evaluate
    :type configs: iterable of dict of str -> float64
    :param options: passed through to ``system.energy``
    :type options: dict of str -> str
    :return: ``(energy, config)`` of every configuration
    :rtype: list of tuple

    """
    return [(system.energy(config, options), config) for config in configs]


def least_energy(landscape):
    """Return the ``(energy, config)`` of least energy in ``landscape``; the first one on ties.

    :raises: ValueError: if ``landscape`` is empty

    """
    if not landscape:
        raise ValueError('Cannot pick an optimum from an empty energy landscape.')
    return min(landscape, key=lambda energy_config: energy_config[0])


class GlobalOptimizer(GlobalOptimizerInterface):

    """Base class of the global optimizers: holds the system, the parameters and the landscape of the last search.

    Subclasses set ``parameters_type`` and implement :meth:`optimize`.

    """

    # Type of the parameters object, specified in subclass
    parameters_type = None

    def __init__(self, system, parameters, domain_bounds=None, random_state=None):
        """Construct the optimizer.

        :param system: the system being tuned
        :type system: :class:`dynatune.interfaces.globally_optimizable_interface.GloballyOptimizableInterface`
        :param parameters: parameters describing how to perform optimization
        :type parameters: ``dynatune.optimization.parameters.*Parameters`` object, matching parameters_type
        :param domain_bounds: [min, max] of every searched hyper-parameter; None for an unbounded search
        :type domain_bounds: dict of str -> ClosedInterval (or [min, max] pair), or None
        :param random_state: source of randomness; None for a fresh unseeded one
        :type random_state: numpy.random.RandomState
        :raises: TypeError: if ``parameters`` is not a ``parameters_type``

        """
        if not isinstance(parameters, self.parameters_type):
            raise TypeError('parameters is of type: {0}, expected {1}'.format(parameters.__class__, self.parameters_type))

        self.system = system
        self.parameters = parameters
        self.domain_bounds = domain_bounds
        self.random_state = random_state if random_state is not None else numpy.random.RandomState()
        self.landscape = []
        self.log = logging.getLogger(__name__)

    def _finish(self, landscape):
        """Persist the least energy configuration of ``landscape`` into the system and return ``(system, optimum)``."""
        self.landscape = list(landscape)
        optimal_energy, optimal_config = least_energy(self.landscape)
        if not numpy.isfinite(optimal_energy):
            self.log.warning('{0}: all {1:d} configurations failed; keeping {2}'.format(type(self).__name__, len(self.landscape), optimal_config))

        self.system.persist(optimal_config)
        self.log.info('{0}: optimum {1} with energy {2} after {3:d} evaluations'.format(
            type(self).__name__,
            optimal_config,
            optimal_energy,
            len(self.landscape),
        ))
        return self.system, optimal_config
