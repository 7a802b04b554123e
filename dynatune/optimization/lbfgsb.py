# -*- coding: utf-8 -*-
"""Local search of the hyper-parameters with scipy's L-BFGS-B and finite-difference gradients.

The BFGS (Broyden-Fletcher-Goldfarb-Shanno) algorithm is a quasi-Newton algorithm for optimization. L-BFGS-B is
its limited memory variant handling box constraints, i.e., the domain bounds of the hyper-parameters.

The energy of a model has no analytic gradient w.r.t. its hyper-parameters, so gradients are approximated by
finite differences of step ``epsilon`` (in search coordinates).

For more information, visit the scipy docs and the wikipedia page on BFGS:
http://en.wikipedia.org/wiki/Limited-memory_BFGS
http://docs.scipy.org/doc/scipy/reference/generated/scipy.optimize.fmin_l_bfgs_b.html

"""
import numpy
import scipy.optimize

from dynatune.optimization.global_optimizer import GlobalOptimizer
from dynatune.optimization.hyper_parameter_space import HyperParameterSpace
from dynatune.optimization.parameters import LBFGSBParameters


class LBFGSBLocalSearch(GlobalOptimizer):

    """Minimize the energy with L-BFGS-B, starting from the initial configuration (projected into the domain).

    Every configuration evaluated by scipy is recorded in ``landscape``; the optimum is the recorded configuration of
    least energy, which need not be the point scipy terminates at when trainings are noisy.

    """

    parameters_type = LBFGSBParameters

    def _scipy_energy(self, space, options):
        """Wrap ``system.energy`` as a function of search coordinates, recording every evaluation.

        Infinite energies (failed trainings) are reported to scipy as ``failure_penalty``.

        """
        def energy(point):
            config = space.to_config(point)
            value = self.system.energy(config, options)
            self.landscape.append((value, config))
            return value if numpy.isfinite(value) else self.parameters.failure_penalty

        return energy

    def optimize(self, initial_config, options=None):
        """Run L-BFGS-B from ``initial_config``; persist and return the configuration of least energy evaluated.

        :param initial_config: start of the search; its keys are the hyper-parameters searched over
        :type initial_config: dict of str -> float64
        :param options: passed through to ``system.energy``
        :return: (the tuned system, the optimal configuration)
        :rtype: tuple

        """
        if not initial_config:
            raise ValueError('initial_config must hold at least one hyper-parameter.')

        space = HyperParameterSpace.from_config(initial_config, domain_bounds=self.domain_bounds)
        bounds = None
        if space.domain is not None:
            bounds = [(interval.min, interval.max) for interval in space.domain.get_bounding_box()]

        self.landscape = []
        _, _, info = scipy.optimize.fmin_l_bfgs_b(
            func=self._scipy_energy(space, options),
            x0=space.restrict(space.to_point(initial_config)),
            bounds=bounds,
            approx_grad=True,
            **self.parameters.scipy_kwargs()
        )
        self.log.debug('L-BFGS-B stopped after {0:d} evaluations: {1}'.format(info['funcalls'], info['task']))
        return self._finish(self.landscape)
