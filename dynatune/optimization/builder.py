# -*- coding: utf-8 -*-
"""Construct optimizers (and their parameters) from an optimizer name and a dict, e.g. parsed from a json config file.

``params_dict`` is validated by the colander schema of the optimizer (see :mod:`dynatune.schemas`); missing fields
take their defaults from :mod:`dynatune.constant`, unknown fields are an error.

"""
import collections

from dynatune.constant import COUPLED_SIMULATED_ANNEALING_OPTIMIZER, GRID_SEARCH_OPTIMIZER, L_BFGS_B_OPTIMIZER, OPTIMIZER_TYPES, RANDOM_SEARCH_OPTIMIZER
from dynatune.optimization.coupled_simulated_annealing import CoupledSimulatedAnnealing
from dynatune.optimization.grid_search import GridSearch
from dynatune.optimization.lbfgsb import LBFGSBLocalSearch
from dynatune.optimization.parameters import CoupledSimulatedAnnealingParameters, GridSearchParameters, LBFGSBParameters, RandomSearchParameters
from dynatune.optimization.random_search import RandomSearch
from dynatune.schemas import CoupledSimulatedAnnealingParametersSchema, GridSearchParametersSchema, LBFGSBParametersSchema, RandomSearchParametersSchema


OptimizerMethod = collections.namedtuple(
        'OptimizerMethod',
        [
            'optimizer_type',
            'schema_class',
            'parameters_class',
            'optimizer_class',
            ],
        )

#: Everything needed to build each optimizer in :data:`dynatune.constant.OPTIMIZER_TYPES`
OPTIMIZER_TYPES_TO_OPTIMIZER_METHODS = {
        GRID_SEARCH_OPTIMIZER: OptimizerMethod(
            optimizer_type=GRID_SEARCH_OPTIMIZER,
            schema_class=GridSearchParametersSchema,
            parameters_class=GridSearchParameters,
            optimizer_class=GridSearch,
            ),
        RANDOM_SEARCH_OPTIMIZER: OptimizerMethod(
            optimizer_type=RANDOM_SEARCH_OPTIMIZER,
            schema_class=RandomSearchParametersSchema,
            parameters_class=RandomSearchParameters,
            optimizer_class=RandomSearch,
            ),
        COUPLED_SIMULATED_ANNEALING_OPTIMIZER: OptimizerMethod(
            optimizer_type=COUPLED_SIMULATED_ANNEALING_OPTIMIZER,
            schema_class=CoupledSimulatedAnnealingParametersSchema,
            parameters_class=CoupledSimulatedAnnealingParameters,
            optimizer_class=CoupledSimulatedAnnealing,
            ),
        L_BFGS_B_OPTIMIZER: OptimizerMethod(
            optimizer_type=L_BFGS_B_OPTIMIZER,
            schema_class=LBFGSBParametersSchema,
            parameters_class=LBFGSBParameters,
            optimizer_class=LBFGSBLocalSearch,
            ),
        }

#: Optimizers that cannot run without domain bounds
BOUNDED_OPTIMIZER_TYPES = frozenset([RANDOM_SEARCH_OPTIMIZER, L_BFGS_B_OPTIMIZER])


def _get_optimizer_method(optimizer_type):
    """Return the OptimizerMethod of ``optimizer_type``; raise ValueError for unknown types."""
    if optimizer_type not in OPTIMIZER_TYPES_TO_OPTIMIZER_METHODS:
        raise ValueError('Unknown optimizer type {0}; expected one of {1}.'.format(optimizer_type, OPTIMIZER_TYPES))
    return OPTIMIZER_TYPES_TO_OPTIMIZER_METHODS[optimizer_type]


def build_optimizer_parameters(optimizer_type, params_dict=None):
    """Validate ``params_dict`` and convert it into the parameters namedtuple of ``optimizer_type``.

    :param optimizer_type: one of :data:`dynatune.constant.OPTIMIZER_TYPES`
    :type optimizer_type: str
    :param params_dict: optimizer parameters; None (or missing fields) for the defaults
    :type params_dict: dict
    :return: parameters of the optimizer
    :rtype: ``dynatune.optimization.parameters.*Parameters``
    :raises: ValueError: for an unknown ``optimizer_type``
    :raises: colander.Invalid: if ``params_dict`` has unknown keys or bad values

    """
    optimizer_method = _get_optimizer_method(optimizer_type)
    validated = optimizer_method.schema_class().deserialize(params_dict if params_dict is not None else {})
    return optimizer_method.parameters_class(**validated)


def build_optimizer(optimizer_type, system, params_dict=None, domain_bounds=None, random_state=None):
    """Construct the optimizer of ``optimizer_type`` tuning ``system``.

    :param optimizer_type: one of :data:`dynatune.constant.OPTIMIZER_TYPES`
    :type optimizer_type: str
    :param system: the system being tuned
    :type system: :class:`dynatune.interfaces.globally_optimizable_interface.GloballyOptimizableInterface`
    :param params_dict: optimizer parameters, see :func:`build_optimizer_parameters`
    :type params_dict: dict
    :param domain_bounds: [min, max] of every searched hyper-parameter
    :type domain_bounds: dict of str -> ClosedInterval (or [min, max] pair), or None
    :param random_state: source of randomness of stochastic optimizers
    :type random_state: numpy.random.RandomState
    :return: the optimizer
    :rtype: :class:`dynatune.interfaces.global_optimizer_interface.GlobalOptimizerInterface`
    :raises: ValueError: for an unknown ``optimizer_type``, or missing ``domain_bounds`` of a bounded optimizer
    :raises: colander.Invalid: if ``params_dict`` is invalid

    """
    optimizer_method = _get_optimizer_method(optimizer_type)
    if optimizer_type in BOUNDED_OPTIMIZER_TYPES and domain_bounds is None:
        raise ValueError('Optimizer {0} requires domain bounds.'.format(optimizer_type))

    parameters = build_optimizer_parameters(optimizer_type, params_dict)
    return optimizer_method.optimizer_class(system, parameters, domain_bounds=domain_bounds, random_state=random_state)
