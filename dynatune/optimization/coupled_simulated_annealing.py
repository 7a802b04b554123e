# -*- coding: utf-8 -*-
r"""Coupled Simulated Annealing (CSA): a set of annealing chains whose acceptance probabilities are coupled.

Xavier-de-Souza, Suykens, Vandewalle, Bolle: Coupled Simulated Annealing,
IEEE Trans. Systems, Man and Cybernetics, Part B, 40(2), 2010.

**Overview**

CSA starts ``m`` chains on the grid of :class:`dynatune.optimization.grid_search.GridSearch`. At iteration ``k``
every chain ``i`` proposes a candidate ``y_i = x_i + T_k * eps`` (``eps`` standard Cauchy,
``T_k = T_0 / (k + 1)``), projected into the domain. A candidate of lower (or equal) energy is always accepted.
Otherwise it is accepted with probability ``A_i``, which depends on the variant:

* ``CSA-M`` and ``CSA-MwVC`` couple the chains:

  .. math:: A_i = \frac{\exp((E(x_i) - \max_j E(x_j)) / T_{ac})}{\sum_j \exp((E(x_j) - \max_j E(x_j)) / T_{ac})}

  so chains sitting at high energies are the likeliest to jump.
* ``CSA-SA`` runs independent Metropolis chains, ``A_i = \exp(-(E(y_i) - E(x_i)) / T_{ac})``.

``CSA-M`` and ``CSA-SA`` cool the acceptance temperature as ``T_{ac} / \log(k + 2)``. ``CSA-MwVC`` instead
steers the variance of the ``A_i`` towards 99% of its maximum ``(m - 1) / m^2``: the temperature shrinks by a factor
``1 - \alpha`` while the variance is below target and grows by ``1 + \alpha`` otherwise.

Failed configurations (infinite energy) never attract a chain: they are ranked just above the worst finite energy
when coupling, and a failed candidate is only accepted in place of a failed state.

"""
import numpy

from dynatune.constant import CSA_MWVC, CSA_SA, CSA_VARIANCE_CONTROL_ALPHA, CSA_VARIANTS
from dynatune.optimization.global_optimizer import GlobalOptimizer, energy_landscape
from dynatune.optimization.hyper_parameter_space import HyperParameterSpace
from dynatune.optimization.parameters import CoupledSimulatedAnnealingParameters


def coupled_acceptance_probabilities(energies, acceptance_temperature):
    """Compute the coupled acceptance probability of every chain.

    :param energies: current energy of every chain
    :type energies: array of float64 with shape (m)
    :param acceptance_temperature: acceptance temperature ``T_ac``
    :type acceptance_temperature: float64 > 0.0
    :return: acceptance probabilities, summing to 1
    :rtype: array of float64 with shape (m)

    """
    energies = numpy.asarray(energies, dtype=numpy.float64)
    finite = numpy.isfinite(energies)
    if not numpy.any(finite):
        return numpy.full(energies.shape, 1.0 / energies.size)

    worst = numpy.amax(energies[finite])
    clamped = numpy.where(finite, energies, worst + 1.0)
    unnormalized = numpy.exp((clamped - numpy.amax(clamped)) / acceptance_temperature)
    return unnormalized / numpy.sum(unnormalized)


def metropolis_acceptance_probabilities(energies, candidate_energies, acceptance_temperature):
    """Compute the independent (Metropolis) acceptance probability of every chain's candidate.

    :param energies: current energy of every chain
    :type energies: array of float64 with shape (m)
    :param candidate_energies: energy of every chain's candidate
    :type candidate_energies: array of float64 with shape (m)
    :param acceptance_temperature: acceptance temperature ``T_ac``
    :type acceptance_temperature: float64 > 0.0
    :rtype: array of float64 with shape (m)

    """
    energies = numpy.asarray(energies, dtype=numpy.float64)
    candidate_energies = numpy.asarray(candidate_energies, dtype=numpy.float64)
    with numpy.errstate(invalid='ignore'):
        exponent = numpy.minimum(0.0, -(candidate_energies - energies) / acceptance_temperature)
        probabilities = numpy.exp(exponent)
    probabilities[~numpy.isfinite(candidate_energies)] = 0.0
    probabilities[numpy.isnan(probabilities)] = 1.0
    return probabilities


def acceptance_variance(acceptance_probabilities):
    """Return the variance of the coupled acceptance probabilities, ``mean(A^2) - 1/m^2``."""
    num_chains = acceptance_probabilities.size
    return numpy.mean(acceptance_probabilities ** 2) - 1.0 / num_chains ** 2


class CoupledSimulatedAnnealing(GlobalOptimizer):

    """Coupled Simulated Annealing over the hyper-parameters of the initial configuration.

    See the module docstring and :class:`dynatune.optimization.parameters.CoupledSimulatedAnnealingParameters`.
    With a single chain the coupled variants reduce to ``CSA-SA``.

    """

    parameters_type = CoupledSimulatedAnnealingParameters

    def __init__(self, system, parameters, domain_bounds=None, random_state=None):
        """Construct a CoupledSimulatedAnnealing; see :class:`dynatune.optimization.global_optimizer.GlobalOptimizer`.

        :raises: ValueError: if ``parameters.variant`` is not one of :data:`dynatune.constant.CSA_VARIANTS`

        """
        super(CoupledSimulatedAnnealing, self).__init__(system, parameters, domain_bounds=domain_bounds, random_state=random_state)
        if parameters.variant not in CSA_VARIANTS:
            raise ValueError('Unknown CSA variant {0}; expected one of {1}.'.format(parameters.variant, sorted(CSA_VARIANTS)))

    def _acceptance_probabilities(self, energies, candidate_energies, acceptance_temperature):
        """Compute the probability of every chain to accept its candidate, by the rule of this optimizer's variant.

        ``CSA-SA``, and any variant with a single chain, uses the Metropolis rule; ``CSA-M`` and ``CSA-MwVC`` use the
        coupled rule, which ignores ``candidate_energies``.

        :param energies: current energy of every chain
        :type energies: array of float64 with shape (m)
        :param candidate_energies: energy of every chain's candidate
        :type candidate_energies: array of float64 with shape (m)
        :param acceptance_temperature: acceptance temperature ``T_ac``
        :type acceptance_temperature: float64 > 0.0
        :rtype: array of float64 with shape (m)

        """
        if self.parameters.variant == CSA_SA or energies.size == 1:
            return metropolis_acceptance_probabilities(energies, candidate_energies, acceptance_temperature)
        return coupled_acceptance_probabilities(energies, acceptance_temperature)

    def _next_acceptance_temperature(self, iteration, acceptance_temperature, acceptance_probabilities):
        """Return the acceptance temperature of iteration ``iteration + 1``."""
        num_chains = acceptance_probabilities.size
        if self.parameters.variant == CSA_MWVC and num_chains > 1:
            target_variance = 0.99 * (num_chains - 1) / num_chains ** 2
            if acceptance_variance(acceptance_probabilities) < target_variance:
                return acceptance_temperature * (1.0 - CSA_VARIANCE_CONTROL_ALPHA)
            return acceptance_temperature * (1.0 + CSA_VARIANCE_CONTROL_ALPHA)

        # CSA_M, CSA_SA
        return self.parameters.acceptance_temperature / numpy.log(iteration + 3.0)

    def optimize(self, initial_config, options=None):
        """Anneal ``m`` chains started on the grid around ``initial_config``; persist and return the best configuration seen.

        :param initial_config: anchor of the initial grid; its keys are the hyper-parameters searched over
        :type initial_config: dict of str -> float64
        :param options: passed through to ``system.energy``
        :return: (the tuned system, the optimal configuration)
        :rtype: tuple

        """
        if not initial_config:
            raise ValueError('initial_config must hold at least one hyper-parameter.')

        space = HyperParameterSpace.from_config(initial_config, domain_bounds=self.domain_bounds, log_scale=self.parameters.log_scale)
        states = space.generate_grid(initial_config, self.parameters.grid_size, self.parameters.step_size)
        num_chains = states.shape[0]
        self.log.info('CoupledSimulatedAnnealing ({0}): {1:d} chains, {2:d} iterations'.format(
            self.parameters.variant,
            num_chains,
            self.parameters.max_iterations,
        ))

        landscape = energy_landscape(self.system, [space.to_config(state) for state in states], options)
        energies = numpy.array([energy for energy, _ in landscape], dtype=numpy.float64)

        acceptance_temperature = self.parameters.acceptance_temperature
        if self.parameters.variant != CSA_MWVC or num_chains == 1:
            acceptance_temperature /= numpy.log(2.0)
        for iteration in range(self.parameters.max_iterations):
            generation_temperature = self.parameters.generation_temperature / (iteration + 1.0)
            steps = generation_temperature * self.random_state.standard_cauchy(size=states.shape)
            candidates = numpy.array([space.restrict(point) for point in states + steps]).reshape(states.shape)

            candidate_landscape = energy_landscape(self.system, [space.to_config(candidate) for candidate in candidates], options)
            candidate_energies = numpy.array([energy for energy, _ in candidate_landscape], dtype=numpy.float64)
            landscape.extend(candidate_landscape)

            acceptance_probabilities = self._acceptance_probabilities(energies, candidate_energies, acceptance_temperature)
            accepted = (candidate_energies <= energies) | (self.random_state.uniform(size=num_chains) < acceptance_probabilities)
            # a failed candidate only replaces a failed state
            accepted &= numpy.isfinite(candidate_energies) | ~numpy.isfinite(energies)
            states[accepted] = candidates[accepted]
            energies[accepted] = candidate_energies[accepted]

            self.log.debug('iteration {0:d}: T_gen = {1}, T_ac = {2}, accepted {3:d}/{4:d}, best energy {5}'.format(
                iteration,
                generation_temperature,
                acceptance_temperature,
                int(numpy.sum(accepted)),
                num_chains,
                numpy.amin(energies),
            ))
            acceptance_temperature = self._next_acceptance_temperature(iteration, acceptance_temperature, acceptance_probabilities)

        return self._finish(landscape)
