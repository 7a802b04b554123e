# -*- coding: utf-8 -*-
"""Interface for a trainable model, instantiated once per hyper-parameter configuration by :class:`dynatune.tunable_model.TunableModel`."""
from abc import ABCMeta, abstractmethod


class ModelInterface(object, metaclass=ABCMeta):

    """Interface for a model that can be trained on ``(input, target)`` patterns, evaluated and released.

    A model instance is single-use in a tuning run: it is built for one configuration, trained, evaluated and then
    closed, whether or not training succeeded.

    """

    @abstractmethod
    def train(self, data, config):
        """Fit the model.

        :param data: training patterns
        :type data: :class:`dynatune.data_containers.DataSet` of ``(input, target)``
        :param config: how to train (summary directory, data processing, stop criteria)
        :type config: :class:`dynatune.training.TrainingConfig`

        """
        pass

    @abstractmethod
    def predict(self, inputs):
        """Return the predictions of the trained model for ``inputs``."""
        pass

    @abstractmethod
    def evaluate(self, data, metrics, data_processing):
        """Compute each of ``metrics`` on the predictions of the model for ``data``.

        :param data: evaluation patterns
        :type data: :class:`dynatune.data_containers.DataSet` of ``(input, target)``
        :param metrics: metrics to compute
        :type metrics: list of :class:`dynatune.training.Performance`
        :param data_processing: data pipeline for evaluation
        :type data_processing: :class:`dynatune.training.DataOps`
        :return: value of each metric, in order
        :rtype: list of float64

        """
        pass

    @abstractmethod
    def close(self):
        """Release the resources held by the model; it may not be used afterwards."""
        pass
