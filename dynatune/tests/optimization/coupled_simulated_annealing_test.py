# -*- coding: utf-8 -*-
"""Tests for :class:`dynatune.optimization.coupled_simulated_annealing.CoupledSimulatedAnnealing` and its acceptance rules."""
import numpy

import pytest

from dynatune.constant import CSA_M, CSA_MWVC, CSA_SA, CSA_VARIANCE_CONTROL_ALPHA, CSA_VARIANTS, TEST_COUPLED_SIMULATED_ANNEALING_PARAMETERS
from dynatune.optimization.coupled_simulated_annealing import CoupledSimulatedAnnealing, acceptance_variance, coupled_acceptance_probabilities, metropolis_acceptance_probabilities
from dynatune.optimization.grid_search import GridSearch
from dynatune.optimization.parameters import GridSearchParameters
from dynatune.tests.fake_models import QuadraticSystem
from dynatune.tests.tuning_test_case import TuningTestCase


class GridOnlySystem(QuadraticSystem):

    """A QuadraticSystem where every configuration off a given grid fails."""

    def __init__(self, minimum, grid):
        """Create a GridOnlySystem; ``grid`` is a list of configurations (dict of str -> float64)."""
        super(GridOnlySystem, self).__init__(minimum)
        self._grid = [self._key(config) for config in grid]

    def energy(self, h, options=None):
        """Compute ``E(h)``; ``inf`` off the grid."""
        energy = super(GridOnlySystem, self).energy(h, options=options)
        if self._key(h) not in self._grid:
            return numpy.inf
        return energy


class TestAcceptanceProbabilities(TuningTestCase):

    """Test the coupled and the Metropolis acceptance probabilities."""

    def test_coupled_acceptance(self):
        """Check that coupled probabilities sum to 1 and favor moving the chains at high energies."""
        energies = numpy.array([1.0, 3.0, 2.0])
        acceptance = coupled_acceptance_probabilities(energies, 1.0)

        self.assert_scalar_within_relative(numpy.sum(acceptance), 1.0, 1.0e-14)
        assert acceptance[1] > acceptance[2] > acceptance[0]
        truth = numpy.exp(energies - 3.0) / numpy.sum(numpy.exp(energies - 3.0))
        self.assert_vector_within_relative(acceptance, truth, 1.0e-14)

    def test_coupled_acceptance_temperature(self):
        """Check that high temperatures flatten the probabilities toward uniform."""
        acceptance = coupled_acceptance_probabilities(numpy.array([1.0, 3.0]), 1.0e6)
        self.assert_vector_within_relative(acceptance, numpy.full(2, 0.5), 1.0e-5)

    def test_coupled_acceptance_failures(self):
        """Check that failed chains are clamped above the worst finite energy, or uniform if all failed."""
        acceptance = coupled_acceptance_probabilities(numpy.array([1.0, numpy.inf, 2.0]), 1.0)
        truth = coupled_acceptance_probabilities(numpy.array([1.0, 3.0, 2.0]), 1.0)
        self.assert_vector_within_relative(acceptance, truth, 1.0e-14)

        acceptance = coupled_acceptance_probabilities(numpy.array([numpy.inf, numpy.inf]), 1.0)
        self.assert_vector_within_relative(acceptance, numpy.full(2, 0.5), 0.0)

    def test_metropolis_acceptance(self):
        """Check the Metropolis rule, including failed candidates and failed current states."""
        energies = numpy.array([1.0, 1.0, 1.0, numpy.inf, numpy.inf])
        candidate_energies = numpy.array([0.5, 3.0, numpy.inf, 2.0, numpy.inf])
        acceptance = metropolis_acceptance_probabilities(energies, candidate_energies, 2.0)

        truth = numpy.array([1.0, numpy.exp(-1.0), 0.0, 1.0, 0.0])
        self.assert_vector_within_relative(acceptance, truth, 1.0e-14)

    def test_acceptance_variance(self):
        """Check the variance bounds: 0 for uniform probabilities, (m - 1)/m^2 for a single certain chain."""
        self.assert_scalar_within_absolute(acceptance_variance(numpy.full(4, 0.25)), 0.0, 1.0e-15)
        self.assert_scalar_within_relative(acceptance_variance(numpy.array([1.0, 0.0, 0.0, 0.0])), 3.0 / 16.0, 1.0e-14)


class TestCoupledSimulatedAnnealing(TuningTestCase):

    """Test CSA on a quadratic energy with its minimum away from the initial grid."""

    @classmethod
    @pytest.fixture(autouse=True, scope='class')
    def base_setup(cls):
        """Set up the domain and annealing parameters."""
        cls.domain_bounds = {'a': [-5.0, 5.0], 'b': [-5.0, 5.0]}
        cls.initial_config = {'a': 3.0, 'b': 3.0}
        cls.minimum = {'a': 0.0, 'b': 0.0}
        cls.parameters = TEST_COUPLED_SIMULATED_ANNEALING_PARAMETERS._replace(max_iterations=30)

    def test_variants(self):
        """Check, for every variant, the evaluation count, the domain, and an optimum better than the initial grid."""
        grid_search = GridSearch(QuadraticSystem(self.minimum), GridSearchParameters(self.parameters.grid_size, self.parameters.step_size, False))
        grid_search.optimize(self.initial_config)
        best_grid_energy = min(energy for energy, _ in grid_search.landscape)

        for variant in CSA_VARIANTS:
            system = QuadraticSystem(self.minimum)
            optimizer = CoupledSimulatedAnnealing(
                system,
                self.parameters._replace(variant=variant),
                domain_bounds=self.domain_bounds,
                random_state=numpy.random.RandomState(1),
            )
            _, optimum = optimizer.optimize(self.initial_config)

            num_chains = self.parameters.grid_size ** 2
            assert len(system.evaluations) == num_chains * (self.parameters.max_iterations + 1)
            for config in system.evaluations:
                assert -5.0 <= config['a'] <= 5.0
                assert -5.0 <= config['b'] <= 5.0

            optimal_energy = min(energy for energy, _ in optimizer.landscape)
            assert system.energy(optimum) == optimal_energy
            assert optimal_energy < best_grid_energy
            assert system.persisted == [optimum]

    def test_no_iterations_is_grid_search(self):
        """Check that without iterations CSA evaluates exactly the initial grid."""
        grid_system = QuadraticSystem(self.minimum)
        _, grid_optimum = GridSearch(grid_system, GridSearchParameters(2, 0.5, False)).optimize(self.initial_config)

        system = QuadraticSystem(self.minimum)
        _, optimum = CoupledSimulatedAnnealing(system, self.parameters._replace(max_iterations=0)).optimize(self.initial_config)
        assert system.evaluations == grid_system.evaluations
        assert optimum == grid_optimum

    def test_single_chain(self):
        """Check that a single chain runs with a coupled variant (falling back to Metropolis acceptance)."""
        system = QuadraticSystem({'a': 0.0})
        parameters = self.parameters._replace(grid_size=1, max_iterations=10, variant=CSA_MWVC)
        _, optimum = CoupledSimulatedAnnealing(system, parameters, random_state=numpy.random.RandomState(5)).optimize({'a': 2.0})

        assert len(system.evaluations) == 11
        assert system.energy(optimum) <= 4.0

    def test_reproducible(self):
        """Check that equally seeded runs evaluate the same configurations."""
        evaluations = []
        for _ in range(2):
            system = QuadraticSystem(self.minimum)
            CoupledSimulatedAnnealing(system, self.parameters, domain_bounds=self.domain_bounds, random_state=numpy.random.RandomState(17)).optimize(self.initial_config)
            evaluations.append(system.evaluations)
        assert evaluations[0] == evaluations[1]

    def test_acceptance_temperature_schedules(self):
        """Check the log schedule of CSA-M and CSA-SA, and the variance control of CSA-MwVC."""
        system = QuadraticSystem(self.minimum)
        uniform = numpy.full(4, 0.25)
        certain = numpy.array([1.0, 0.0, 0.0, 0.0])

        for variant in (CSA_M, CSA_SA):
            optimizer = CoupledSimulatedAnnealing(system, self.parameters._replace(variant=variant, acceptance_temperature=2.0))
            self.assert_scalar_within_relative(optimizer._next_acceptance_temperature(0, 5.0, uniform), 2.0 / numpy.log(3.0), 1.0e-14)
            self.assert_scalar_within_relative(optimizer._next_acceptance_temperature(7, 5.0, uniform), 2.0 / numpy.log(10.0), 1.0e-14)

        optimizer = CoupledSimulatedAnnealing(system, self.parameters._replace(variant=CSA_MWVC))
        self.assert_scalar_within_relative(optimizer._next_acceptance_temperature(0, 5.0, uniform), 5.0 * (1.0 - CSA_VARIANCE_CONTROL_ALPHA), 1.0e-14)
        self.assert_scalar_within_relative(optimizer._next_acceptance_temperature(0, 5.0, certain), 5.0 * (1.0 + CSA_VARIANCE_CONTROL_ALPHA), 1.0e-14)

    @pytest.mark.usefixtures('disable_logging')
    def test_failing_initial_states(self):
        """Check that chains started on failed configurations move away from them."""
        grid = [{'a': 3.0, 'b': 3.0}, {'a': 3.0, 'b': 3.5}, {'a': 3.5, 'b': 3.0}, {'a': 3.5, 'b': 3.5}]
        system = QuadraticSystem(self.minimum, failing=grid)
        optimizer = CoupledSimulatedAnnealing(system, self.parameters, domain_bounds=self.domain_bounds, random_state=numpy.random.RandomState(2))
        _, optimum = optimizer.optimize(self.initial_config)
        assert numpy.isfinite(system.energy(optimum))

    @pytest.mark.usefixtures('disable_logging')
    def test_failing_candidates_are_rejected(self):
        """Check that chains on finite energies stay put when every candidate fails, whatever the variant.

        The chains never move, so every batch of candidates is drawn around the initial grid.

        """
        grid = numpy.array([[3.0, 3.0], [3.0, 3.5], [3.5, 3.0], [3.5, 3.5]])
        parameters = self.parameters._replace(max_iterations=5, acceptance_temperature=1.0e6)
        num_chains = grid.shape[0]

        for variant in CSA_VARIANTS:
            system = GridOnlySystem(self.minimum, [{'a': point[0], 'b': point[1]} for point in grid])
            optimizer = CoupledSimulatedAnnealing(
                system,
                parameters._replace(variant=variant),
                domain_bounds=self.domain_bounds,
                random_state=numpy.random.RandomState(3),
            )
            optimizer.optimize(self.initial_config)

            random_state = numpy.random.RandomState(3)
            for iteration in range(parameters.max_iterations):
                steps = parameters.generation_temperature / (iteration + 1.0) * random_state.standard_cauchy(size=grid.shape)
                random_state.uniform(size=num_chains)
                candidates = numpy.clip(grid + steps, -5.0, 5.0)
                for i, candidate in enumerate(candidates):
                    config = system.evaluations[num_chains * (iteration + 1) + i]
                    self.assert_scalar_within_absolute(config['a'], candidate[0], 1.0e-12)
                    self.assert_scalar_within_absolute(config['b'], candidate[1], 1.0e-12)

    def test_invalid_variant(self):
        """Check that unknown variants are rejected."""
        with pytest.raises(ValueError):
            CoupledSimulatedAnnealing(QuadraticSystem(self.minimum), self.parameters._replace(variant='CSA-XYZ'))
