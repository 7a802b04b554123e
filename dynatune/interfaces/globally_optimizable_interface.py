# -*- coding: utf-8 -*-
"""Interface for systems whose hyper-parameters can be tuned by a global optimizer (see :mod:`dynatune.interfaces.global_optimizer_interface`).

Global optimizers in dynatune are MINIMIZERS: a system exposes an *energy* ``E(h)`` for every hyper-parameter
configuration ``h`` and the optimizer searches for the configuration of least energy. This is the opposite
convention from most of the scientific python stack; the energy of a model is typically a validation error,
so "lesser is better" reads naturally.

A configuration is a dict mapping each hyper-parameter name to a float64.

"""
from abc import ABCMeta, abstractmethod


class GloballyOptimizableInterface(object, metaclass=ABCMeta):

    """Interface that a system must fulfill to be tuned by an implementation of GlobalOptimizerInterface."""

    @property
    @abstractmethod
    def hyper_parameters(self):
        """Return the names (list of str) of the hyper-parameters of this system."""
        pass

    @property
    @abstractmethod
    def current_state(self):
        """Return the configuration (dict of str -> float64) this system was last evaluated at or persisted to."""
        pass

    @abstractmethod
    def energy(self, h, options=None):
        """Calculate the energy of the configuration ``h``; optimizers look for the ``h`` minimizing it.

        :param h: the value of every hyper-parameter in :attr:`hyper_parameters`; extra keys are allowed
        :type h: dict of str -> float64
        :param options: optional, implementation specific settings of the evaluation
        :type options: dict of str -> str
        :return: configuration energy ``E(h)``
        :rtype: float64

        """
        pass

    def grad_energy(self, h):
        """Calculate the gradient of the energy at ``h``, if available.

        Most systems cannot differentiate a full training run, so the default is an empty dict: no gradient.

        :return: partial derivative of ``E(h)`` for each hyper-parameter
        :rtype: dict of str -> float64

        """
        return {}

    @abstractmethod
    def persist(self, state):
        """Store ``state`` as the current configuration of this system (e.g., the optimum of a search).

        :param state: a configuration
        :type state: dict of str -> float64

        """
        pass
