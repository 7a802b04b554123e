# -*- coding: utf-8 -*-
"""Grid search: evaluate every configuration of a grid anchored at the initial configuration and keep the best."""
from dynatune.optimization.global_optimizer import GlobalOptimizer, energy_landscape
from dynatune.optimization.hyper_parameter_space import HyperParameterSpace
from dynatune.optimization.parameters import GridSearchParameters


class GridSearch(GlobalOptimizer):

    """Exhaustive search over ``grid_size^{num_hyper_parameters}`` configurations.

    See :class:`dynatune.optimization.parameters.GridSearchParameters` for how the grid is laid out. If domain
    bounds are given, grid points are projected into the domain.

    """

    parameters_type = GridSearchParameters

    def grid(self, initial_config):
        """Return the configurations of the grid anchored at ``initial_config``, ``initial_config`` first.

        :raises: ValueError: if ``initial_config`` is empty, or has non-positive values in log scale

        """
        if not initial_config:
            raise ValueError('initial_config must hold at least one hyper-parameter.')

        space = HyperParameterSpace.from_config(initial_config, domain_bounds=self.domain_bounds, log_scale=self.parameters.log_scale)
        points = space.generate_grid(initial_config, self.parameters.grid_size, self.parameters.step_size)
        return [space.to_config(point) for point in points]

    def optimize(self, initial_config, options=None):
        """Evaluate the energy of every grid configuration; persist and return the one of least energy.

        :param initial_config: anchor of the grid; its keys are the hyper-parameters searched over
        :type initial_config: dict of str -> float64
        :param options: passed through to ``system.energy``
        :return: (the tuned system, the optimal configuration)
        :rtype: tuple

        """
        configs = self.grid(initial_config)
        self.log.info('GridSearch: evaluating {0:d} configurations'.format(len(configs)))
        return self._finish(energy_landscape(self.system, configs, options))
