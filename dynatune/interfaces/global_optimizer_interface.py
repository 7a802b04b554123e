# -*- coding: utf-8 -*-
"""Interface to *minimize* the energy of any system implementing GloballyOptimizableInterface."""
from abc import ABCMeta, abstractmethod


class GlobalOptimizerInterface(object, metaclass=ABCMeta):

    r"""Interface to *minimize* the energy of a :class:`dynatune.interfaces.globally_optimizable_interface.GloballyOptimizableInterface`.

    Implementations are responsible for tracking the system being tuned (``system``) and any parameters needed for
    controlling optimization behavior\*.

    \* Examples include grid sizes, iteration counts, temperatures, etc. Implementers define a FooParameters
       container class for their Foo optimizer in :mod:`dynatune.optimization.parameters`.

    """

    @abstractmethod
    def optimize(self, initial_config, options=None):
        """Search for the configuration of least energy.

        The optimum is persisted into ``system`` (:meth:`GloballyOptimizableInterface.persist`) before returning.

        :param initial_config: starting configuration; its keys define the hyper-parameters searched over
        :type initial_config: dict of str -> float64
        :param options: passed through to every ``system.energy`` call
        :type options: dict of str -> str
        :return: (the tuned system, the optimal configuration)
        :rtype: tuple

        """
        pass
