# -*- coding: utf-8 -*-
"""A model whose hyper-parameters are tuned by minimizing its validation error: :class:`TunableModel`.

**Energy of a configuration**

The energy ``E(h)`` of a hyper-parameter configuration ``h`` is the fitness of a model built and trained for ``h``,
measured on held-out (validation) data. The fitness function follows the "lesser is better" paradigm (e.g., a mean
squared error), so global optimizers (:mod:`dynatune.optimization`) look for the ``h`` minimizing ``E(h)``.

Computing ``E(h)``:

1. build the training config and a fresh model from ``h`` (model config function, model function),
2. train the model on the training split,
3. evaluate the fitness on the validation split, without shuffling or repeating the data,
4. close the model, whatever happened before,
5. write ``h``, ``E(h)`` and a comment to ``<summary_dir>/state.json`` (``E(h)`` and the comment replace any ``energy``
   or ``comment`` entries of ``h``).

A training that fails (diverges, raises, ...) does not abort the search: its energy is ``+inf`` and the state
file records the failure message as the comment. Global optimizers then simply never pick that configuration.

"""
import logging

import numpy

from dynatune.constant import ENERGY_METRIC_NAME, NON_FINITE_ENERGY_COMMENT, RESERVED_STATE_KEYS
from dynatune.data_containers import DataSplit
from dynatune.exceptions import DataSplitException, MissingHyperParameterException, ModelStateException
from dynatune.interfaces.globally_optimizable_interface import GloballyOptimizableInterface
import dynatune.model_function as model_function_helpers
from dynatune.state import write_state
from dynatune.training import Performance


class TunableModel(GloballyOptimizableInterface):

    """Hyper-parameter based model; its energy is the validation fitness of a model trained for a configuration.

    Either ``validation_data`` or ``data_split_function`` must be given. If both are, ``validation_data`` wins and
    the full ``training_data`` is used for training.

    """

    def __init__(
            self,
            model_function,
            model_config_function,
            hyper_parameters,
            training_data,
            convert_to_tensor,
            fitness_function,
            validation_data=None,
            data_split_function=None,
    ):
        """Construct a TunableModel.

        :param model_function: builds an untrained model from a configuration
        :type model_function: callable taking ``h`` and returning a :class:`dynatune.interfaces.model_interface.ModelInterface`
        :param model_config_function: builds the training config of a configuration
        :type model_config_function: callable taking ``h`` and returning a :class:`dynatune.training.TrainingConfig`
        :param hyper_parameters: names of the hyper-parameters
        :type hyper_parameters: iterable of str
        :param training_data: training patterns
        :type training_data: :class:`dynatune.data_containers.DataSet`
        :param convert_to_tensor: converts a pattern to an ``(input, target)`` tuple
        :type convert_to_tensor: callable
        :param fitness_function: ``fitness_function(predictions, targets)``; lesser is better
        :type fitness_function: callable returning float64
        :param validation_data: validation patterns; need not be given if ``data_split_function`` is
        :type validation_data: :class:`dynatune.data_containers.DataSet` or None
        :param data_split_function: True for the patterns of ``training_data`` to train on, False for those to
          validate on; need not be given if ``validation_data`` is
        :type data_split_function: callable returning bool, or None
        :raises: ValueError: if a hyper-parameter name is reserved by the state file

        """
        self.model_function = model_function
        self.model_config_function = model_config_function
        self._hyper_parameters = list(hyper_parameters)
        self.training_data = training_data
        self.convert_to_tensor = convert_to_tensor
        self.fitness_function = fitness_function
        self.validation_data = validation_data
        self.data_split_function = data_split_function
        self._current_state = {}

        reserved = RESERVED_STATE_KEYS.intersection(self._hyper_parameters)
        if reserved:
            raise ValueError('Hyper-parameter names {0} are reserved.'.format(sorted(reserved)))

        self.log = logging.getLogger(__name__)

    @classmethod
    def from_loss_generator(cls, loss_generator, architecture, model_builder, model_config_function, hyper_parameters, training_data, convert_to_tensor, fitness_function, validation_data=None, data_split_function=None, **model_kwargs):
        """Construct a TunableModel whose hyper-parameters only reach the loss.

        See :func:`dynatune.model_function.from_loss_generator` and :meth:`__init__` for the arguments.

        """
        return cls(
            model_function_helpers.from_loss_generator(loss_generator, architecture, model_builder, **model_kwargs),
            model_config_function,
            hyper_parameters,
            training_data,
            convert_to_tensor,
            fitness_function,
            validation_data=validation_data,
            data_split_function=data_split_function,
        )

    @classmethod
    def from_arch_loss_generator(cls, arch_loss_generator, model_builder, model_config_function, hyper_parameters, training_data, convert_to_tensor, fitness_function, validation_data=None, data_split_function=None, **model_kwargs):
        """Construct a TunableModel whose hyper-parameters reach both the architecture and the loss.

        See :func:`dynatune.model_function.from_arch_loss_generator` and :meth:`__init__` for the arguments.

        """
        return cls(
            model_function_helpers.from_arch_loss_generator(arch_loss_generator, model_builder, **model_kwargs),
            model_config_function,
            hyper_parameters,
            training_data,
            convert_to_tensor,
            fitness_function,
            validation_data=validation_data,
            data_split_function=data_split_function,
        )

    @classmethod
    def from_arch_generator(cls, arch_generator, loss, model_builder, model_config_function, hyper_parameters, training_data, convert_to_tensor, fitness_function, validation_data=None, data_split_function=None, **model_kwargs):
        """Construct a TunableModel whose hyper-parameters only reach the architecture.

        See :func:`dynatune.model_function.from_arch_generator` and :meth:`__init__` for the arguments.

        """
        return cls(
            model_function_helpers.from_arch_generator(arch_generator, loss, model_builder, **model_kwargs),
            model_config_function,
            hyper_parameters,
            training_data,
            convert_to_tensor,
            fitness_function,
            validation_data=validation_data,
            data_split_function=data_split_function,
        )

    @property
    def hyper_parameters(self):
        """Return the names of the hyper-parameters of this model."""
        return list(self._hyper_parameters)

    @property
    def current_state(self):
        """Return the configuration this model was last evaluated at or persisted to."""
        return dict(self._current_state)

    def persist(self, state):
        """Store ``state`` as the current configuration of this model."""
        self._current_state = dict(state)

    def data_splits(self):
        """Return the training and validation data.

        :return: ``(training_data, validation_data)`` if validation data was given, else the partition of the
          training data by ``data_split_function``
        :rtype: :class:`dynatune.data_containers.DataSplit`
        :raises: DataSplitException: if neither validation data nor a split function was given

        """
        if self.validation_data is None and self.data_split_function is None:
            raise DataSplitException('If validation data is not explicitly provided, then data_split_function must be defined.')

        if self.validation_data is None:
            return self.training_data.partition(self.data_split_function)
        return DataSplit(training=self.training_data, validation=self.validation_data)

    def energy(self, h, options=None):
        """Calculate the energy of the configuration ``h``: the validation fitness of a model trained for it.

        See the module docstring for the steps. Any ``Exception`` raised while training or evaluating yields an
        energy of ``+inf``; the model is closed in all cases and the state file is always written.

        :param h: the value of every hyper-parameter of this model; extra keys are allowed
        :type h: dict of str -> float64
        :param options: unused; accepted for compatibility with :class:`GloballyOptimizableInterface`
        :type options: dict of str -> str
        :return: configuration energy ``E(h)``; ``+inf`` if training or evaluation failed
        :rtype: float64
        :raises: MissingHyperParameterException: if ``h`` lacks a hyper-parameter (nothing is trained or written)
        :raises: DataSplitException: if the data cannot be split (nothing is trained or written)

        """
        if not all(name in h for name in self._hyper_parameters):
            raise MissingHyperParameterException(self._hyper_parameters, h)

        self._current_state = dict(h)

        train_split, validation_split = self.data_splits()

        # the config first: nothing is left to close if it cannot be built
        train_config = self.model_config_function(h)
        model_instance = self.model_function(h)

        fitness_metric = Performance(name=ENERGY_METRIC_NAME, metric=self.fitness_function)

        try:
            model_instance.train(train_split.map(self.convert_to_tensor), train_config)

            energy = float(model_instance.evaluate(
                validation_split.map(self.convert_to_tensor),
                [fitness_metric],
                train_config.data_processing.for_evaluation(),
            )[0])
            comment = ''
        except ModelStateException as exception:
            self.log.warning('Configuration {0} failed: {1}'.format(h, exception))
            energy, comment = numpy.inf, str(exception)
        except Exception as exception:
            self.log.exception(exception)
            energy, comment = numpy.inf, str(exception) or type(exception).__name__
        finally:
            model_instance.close()

        if numpy.isnan(energy):
            energy, comment = numpy.inf, NON_FINITE_ENERGY_COMMENT

        write_state(train_config.summary_dir, h, energy, comment=comment)

        self.log.info('{0} = {1} for configuration {2}'.format(ENERGY_METRIC_NAME, energy, h))
        return energy
