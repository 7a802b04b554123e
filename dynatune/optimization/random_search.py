# -*- coding: utf-8 -*-
"""Random search: a 'dumb' search evaluating latin hypercube samples of the hyper-parameter domain.

'Dumb' search is inaccurate but never fails and parallels a grid search at a fixed budget; with a few important
hyper-parameters among many, it covers each important axis better than a grid of the same size does.

"""
from dynatune.optimization.global_optimizer import GlobalOptimizer, energy_landscape
from dynatune.optimization.hyper_parameter_space import HyperParameterSpace
from dynatune.optimization.parameters import RandomSearchParameters


class RandomSearch(GlobalOptimizer):

    """Evaluate the initial configuration plus ``num_samples`` latin hypercube samples of the domain; keep the best.

    Requires domain bounds for every hyper-parameter of the initial configuration.

    """

    parameters_type = RandomSearchParameters

    def __init__(self, system, parameters, domain_bounds, random_state=None):
        """Construct a RandomSearch; see :class:`dynatune.optimization.global_optimizer.GlobalOptimizer` for the arguments.

        :raises: ValueError: if ``domain_bounds`` is None

        """
        if domain_bounds is None:
            raise ValueError('RandomSearch requires domain bounds.')
        super(RandomSearch, self).__init__(system, parameters, domain_bounds=domain_bounds, random_state=random_state)

    def samples(self, initial_config):
        """Return ``num_samples`` random configurations of the hyper-parameters of ``initial_config``."""
        if not initial_config:
            raise ValueError('initial_config must hold at least one hyper-parameter.')

        space = HyperParameterSpace.from_config(initial_config, domain_bounds=self.domain_bounds, log_scale=self.parameters.log_scale)
        points = space.domain.generate_uniform_random_points_in_domain(self.parameters.num_samples, random_state=self.random_state)
        return [space.to_config(point) for point in points]

    def optimize(self, initial_config, options=None):
        """Evaluate ``initial_config`` and the random samples; persist and return the configuration of least energy.

        :param initial_config: first configuration evaluated; its keys are the hyper-parameters searched over
        :type initial_config: dict of str -> float64
        :param options: passed through to ``system.energy``
        :return: (the tuned system, the optimal configuration)
        :rtype: tuple

        """
        configs = [dict(initial_config)] + self.samples(initial_config)
        self.log.info('RandomSearch: evaluating {0:d} configurations'.format(len(configs)))
        return self._finish(energy_landscape(self.system, configs, options))
