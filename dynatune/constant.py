# -*- coding: utf-8 -*-
"""Some default configuration parameters for dynatune components."""
from dynatune.optimization.parameters import CoupledSimulatedAnnealingParameters, GridSearchParameters, LBFGSBParameters, RandomSearchParameters
from dynatune.training import DataOps, StopCriteria

# State file constants
#: Name of the file, inside a summary directory, holding a configuration and its energy
STATE_FILE_NAME = 'state.json'
#: Key of the energy in a state file
ENERGY_KEY = 'energy'
#: Key of the comment (failure message, empty on success) in a state file
COMMENT_KEY = 'comment'
#: Keys that a state file reserves; hyper-parameters may not use these names
RESERVED_STATE_KEYS = frozenset([ENERGY_KEY, COMMENT_KEY])

#: Name of the single performance metric evaluated by :meth:`dynatune.tunable_model.TunableModel.energy`
ENERGY_METRIC_NAME = 'Energy'
#: Comment recorded when evaluation produced a NaN energy
NON_FINITE_ENERGY_COMMENT = 'non-finite energy'

# Optimizer constants
GRID_SEARCH_OPTIMIZER = 'grid_search'
RANDOM_SEARCH_OPTIMIZER = 'random_search'
COUPLED_SIMULATED_ANNEALING_OPTIMIZER = 'coupled_simulated_annealing'
L_BFGS_B_OPTIMIZER = 'l_bfgs_b'

#: Optimizer types supported by :mod:`dynatune`
OPTIMIZER_TYPES = [
        GRID_SEARCH_OPTIMIZER,
        RANDOM_SEARCH_OPTIMIZER,
        COUPLED_SIMULATED_ANNEALING_OPTIMIZER,
        L_BFGS_B_OPTIMIZER,
        ]

# CSA variants
#: Coupled acceptance, acceptance temperature on a log schedule
CSA_M = 'CSA-M'
#: Coupled acceptance, acceptance temperature set by variance control
CSA_MWVC = 'CSA-MwVC'
#: Uncoupled Metropolis acceptance: independent simulated annealing chains
CSA_SA = 'CSA-SA'

#: CSA variants supported by :class:`dynatune.optimization.coupled_simulated_annealing.CoupledSimulatedAnnealing`
CSA_VARIANTS = [
        CSA_M,
        CSA_MWVC,
        CSA_SA,
        ]

#: Relative change of the acceptance temperature per CSA-MwVC iteration
CSA_VARIANCE_CONTROL_ALPHA = 0.05

# Training defaults
DEFAULT_DATA_OPS = DataOps(
        shuffle_buffer=0,
        batch_size=0,
        repeat=0,
        )

DEFAULT_STOP_CRITERIA = StopCriteria(
        max_iterations=1000,
        abs_loss_change_tol=1.0e-8,
        )

# Optimizer defaults
DEFAULT_GRID_SEARCH_PARAMETERS = GridSearchParameters(
        grid_size=3,
        step_size=0.3,
        log_scale=False,
        )

DEFAULT_RANDOM_SEARCH_PARAMETERS = RandomSearchParameters(
        num_samples=20,
        log_scale=False,
        )

DEFAULT_COUPLED_SIMULATED_ANNEALING_PARAMETERS = CoupledSimulatedAnnealingParameters(
        grid_size=2,
        step_size=0.3,
        log_scale=False,
        max_iterations=10,
        variant=CSA_MWVC,
        generation_temperature=1.0,
        acceptance_temperature=1.0,
        )

DEFAULT_LBFGSB_PARAMETERS = LBFGSBParameters(
        max_func_evals=100,
        max_metric_correc=10,
        factr=1.0e7,
        pgtol=1.0e-5,
        epsilon=1.0e-3,
        failure_penalty=1.0e10,
        )

#: Default parameters, keyed by optimizer type
DEFAULT_OPTIMIZER_PARAMETERS = {
        GRID_SEARCH_OPTIMIZER: DEFAULT_GRID_SEARCH_PARAMETERS,
        RANDOM_SEARCH_OPTIMIZER: DEFAULT_RANDOM_SEARCH_PARAMETERS,
        COUPLED_SIMULATED_ANNEALING_OPTIMIZER: DEFAULT_COUPLED_SIMULATED_ANNEALING_PARAMETERS,
        L_BFGS_B_OPTIMIZER: DEFAULT_LBFGSB_PARAMETERS,
        }

# Minimal parameters for testing and demos (where speed is more important than accuracy)
TEST_GRID_SEARCH_PARAMETERS = GridSearchParameters(
        grid_size=2,
        step_size=1.0,
        log_scale=False,
        )

TEST_COUPLED_SIMULATED_ANNEALING_PARAMETERS = CoupledSimulatedAnnealingParameters(
        grid_size=2,
        step_size=0.5,
        log_scale=False,
        max_iterations=3,
        variant=CSA_MWVC,
        generation_temperature=1.0,
        acceptance_temperature=1.0,
        )
