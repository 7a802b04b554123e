# -*- coding: utf-8 -*-
"""Containers for the parameters that control the behavior of the global optimizers in :mod:`dynatune.optimization`.

Defaults for each container are in :mod:`dynatune.constant`; dict inputs (e.g., parsed from a json config file)
are validated and converted by :func:`dynatune.optimization.builder.build_optimizer_parameters`.

"""
import collections


# See GridSearchParameters (below) for docstring.
_BaseGridSearchParameters = collections.namedtuple('_BaseGridSearchParameters', [
    'grid_size',
    'step_size',
    'log_scale',
])


class GridSearchParameters(_BaseGridSearchParameters):

    r"""Container to hold parameters that specify the behavior of Grid Search.

    **Grid**

    The grid is anchored at the initial configuration handed to ``optimize``. Along the axis of hyper-parameter ``h_j``
    the grid holds ``grid_size`` values:

    * linear scale: ``h_j + step_size * i``
    * log scale: ``h_j * exp(step_size * i)``

    for ``i = 0, ..., grid_size - 1``. The full grid is the cartesian product of the axes, so it holds
    ``grid_size^{num_hyper_parameters}`` configurations; each one costs a full model training.

    :ivar grid_size: (*int > 0*) number of grid values per hyper-parameter (suggest: 2-5)
    :ivar step_size: (*float64 > 0.0*) spacing between grid values, in log units if ``log_scale`` (suggest: 0.2-1.0)
    :ivar log_scale: (*bool*) whether to space the grid geometrically; the initial values must then be positive

    """

    __slots__ = ()


# See RandomSearchParameters (below) for docstring.
_BaseRandomSearchParameters = collections.namedtuple('_BaseRandomSearchParameters', [
    'num_samples',
    'log_scale',
])


class RandomSearchParameters(_BaseRandomSearchParameters):

    """Container to hold parameters that specify the behavior of Random Search.

    Samples are drawn on a latin hypercube over the hyper-parameter domain (in log space if ``log_scale``).

    :ivar num_samples: (*int > 0*) number of configurations to evaluate (suggest: 10-100)
    :ivar log_scale: (*bool*) sample uniformly in log space; the domain bounds must then be positive

    """

    __slots__ = ()


# See CoupledSimulatedAnnealingParameters (below) for docstring.
_BaseCoupledSimulatedAnnealingParameters = collections.namedtuple('_BaseCoupledSimulatedAnnealingParameters', [
    'grid_size',
    'step_size',
    'log_scale',
    'max_iterations',
    'variant',
    'generation_temperature',
    'acceptance_temperature',
])


class CoupledSimulatedAnnealingParameters(_BaseCoupledSimulatedAnnealingParameters):

    r"""Container to hold parameters that specify the behavior of Coupled Simulated Annealing (CSA).

    Xavier-de-Souza, Suykens, Vandewalle, Bolle: Coupled Simulated Annealing,
    IEEE Trans. Systems, Man and Cybernetics, Part B, 40(2), 2010.

    **States**

    CSA runs one annealing chain per grid configuration (see :class:`GridSearchParameters` for how the grid is built),
    so ``m = grid_size^{num_hyper_parameters}`` chains run in parallel and each iteration costs ``m`` trainings.

    **Temperatures**

    Candidates are generated as ``x + T_k * eps`` where ``eps`` is standard Cauchy and
    ``T_k = generation_temperature / (k + 1)``. In log scale the step is taken on ``log(x)``.

    The acceptance temperature ``T_ac`` starts at ``acceptance_temperature``; it follows
    ``T_ac / log(k + 2)`` for the ``CSA-M`` and ``CSA-SA`` variants and is adapted by variance control
    for ``CSA-MwVC``.

    :ivar grid_size: (*int > 0*) number of grid values per hyper-parameter for the initial states (suggest: 2-3)
    :ivar step_size: (*float64 > 0.0*) spacing between initial grid values (suggest: 0.2-1.0)
    :ivar log_scale: (*bool*) anneal in log space; the initial values must then be positive
    :ivar max_iterations: (*int >= 0*) number of annealing iterations (suggest: 5-20)
    :ivar variant: (*str*) one of :data:`dynatune.constant.CSA_VARIANTS`
    :ivar generation_temperature: (*float64 > 0.0*) initial generation temperature ``T_0`` (suggest: 1.0)
    :ivar acceptance_temperature: (*float64 > 0.0*) initial acceptance temperature (suggest: 1.0)

    """

    __slots__ = ()


# See LBFGSBParameters (below) for docstring.
_BaseLBFGSBParameters = collections.namedtuple('_BaseLBFGSBParameters', [
    'max_func_evals',
    'max_metric_correc',
    'factr',
    'pgtol',
    'epsilon',
    'failure_penalty',
])


class LBFGSBParameters(_BaseLBFGSBParameters):

    r"""Container to hold parameters that specify the behavior of the L-BFGS-B local search.

    The energy of a configuration is a full model training, so its gradient is approximated by finite differences
    (``approx_grad``); every gradient costs ``num_hyper_parameters + 1`` trainings.

    Suggested values come from scipy documentation for ``scipy.optimize.fmin_l_bfgs_b``:
    http://docs.scipy.org/doc/scipy/reference/generated/scipy.optimize.fmin_l_bfgs_b.html

    :ivar max_func_evals: (*int > 0*) maximum number of energy evaluations to make (suggest: 50-200)
    :ivar max_metric_correc: (*int > 0*) maximum number of variable metric corrections used to define the limited memory matrix (suggest: 10)
    :ivar factr: (*float64 > 1.0*) 1e12 for low accuracy, 1e7 for moderate accuracy, and 10 for extremely high accuracy (suggest: 1.0e7)
    :ivar pgtol: (*float64 > 0.0*) cutoff for highest component of gradient to be considered a critical point (suggest: 1.0e-5)
    :ivar epsilon: (*float64 > 0.0*) step size for approximating the gradient (suggest: 1.0e-3; training noise swamps smaller steps)
    :ivar failure_penalty: (*float64*) finite energy reported to scipy in place of the infinite energy of a failed training

    """

    __slots__ = ()

    def scipy_kwargs(self):
        """Return a dict that can be unpacked as kwargs to ``scipy.optimize.fmin_l_bfgs_b``.

        :return: kwargs for controlling the behavior of fmin_l_bfgs_b
        :rtype: dict

        """
        out_dict = dict(self._asdict())
        out_dict.pop('failure_penalty')
        out_dict['m'] = out_dict.pop('max_metric_correc')
        out_dict['maxfun'] = out_dict.pop('max_func_evals')
        return out_dict
