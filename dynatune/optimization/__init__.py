# -*- coding: utf-8 -*-
"""Global optimizers (MINIMIZERS) of the energy of a :class:`dynatune.interfaces.globally_optimizable_interface.GloballyOptimizableInterface`.

* :class:`dynatune.optimization.grid_search.GridSearch`: exhaustive search of a grid anchored at the initial configuration
* :class:`dynatune.optimization.random_search.RandomSearch`: latin hypercube sampling of a bounded domain
* :class:`dynatune.optimization.coupled_simulated_annealing.CoupledSimulatedAnnealing`: annealing chains started on a grid
* :class:`dynatune.optimization.lbfgsb.LBFGSBLocalSearch`: bounded quasi-Newton search with finite-difference gradients

:func:`dynatune.optimization.builder.build_optimizer` constructs any of them from a name and a dict of parameters.

"""
