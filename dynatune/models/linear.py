# -*- coding: utf-8 -*-
r"""A model linear in its features, trained by mini-batch gradient descent.

The model predicts ``p = \phi(x) W`` where ``\phi`` is the architecture (a feature map, see
:mod:`dynatune.models.architectures`) and ``W`` holds one column of weights per target. Each step on a mini-batch
``B`` updates::

  W <- W - learning_rate * (\phi(x_B)^T g_B / |B| + l2 * W)

with ``g_B`` the per-sample loss gradients (see :mod:`dynatune.models.losses`).

Training diverges when the learning rate is too large for the features; the training loss then overflows and
:meth:`LinearModel.train` raises :class:`dynatune.exceptions.ModelStateException`, which
:class:`dynatune.tunable_model.TunableModel` turns into an infinite energy.

"""
import logging

import numpy

from dynatune.exceptions import ModelStateException
from dynatune.interfaces.model_interface import ModelInterface


class LinearModel(ModelInterface):

    """Linear model over the features of an architecture.

    .. Note:: see the module docstring for the training update.

    """

    def __init__(self, architecture, loss, seed=None):
        """Construct an untrained LinearModel.

        :param architecture: feature map from inputs (n, input_dim) to features (n, num_features)
        :type architecture: callable
        :param loss: training loss, carrying learning rate and l2 penalty
        :type loss: :mod:`dynatune.models.losses` loss
        :param seed: seed of the shuffling of the training data
        :type seed: int or None

        """
        self.architecture = architecture
        self.loss = loss
        self._random_state = numpy.random.RandomState(seed)
        self._weights = None
        self._target_ndim = None
        self._closed = False
        self.training_losses = []
        self.log = logging.getLogger(__name__)

    @property
    def weights(self):
        """Return a copy of the trained weights, array of float64 with shape (num_features, num_targets); None if untrained."""
        if self._weights is None:
            return None
        return numpy.copy(self._weights)

    @property
    def closed(self):
        """Return True once :meth:`close` was called."""
        return self._closed

    def _check_open(self):
        """Raise ModelStateException if this model was closed."""
        if self._closed:
            raise ModelStateException('Model is closed.')

    def _check_trained(self):
        """Raise ModelStateException if this model is closed or was never trained."""
        self._check_open()
        if self._weights is None:
            raise ModelStateException('Model must be trained before it can predict.')

    def _features(self, inputs):
        """Return the features of ``inputs`` as a 2D array."""
        inputs = numpy.asarray(inputs, dtype=numpy.float64)
        if inputs.ndim == 1:
            inputs = inputs.reshape(-1, 1)
        return numpy.asarray(self.architecture(inputs), dtype=numpy.float64)

    def _objective(self, features, targets, weights):
        """Return the training loss (data term plus penalty) of ``weights``."""
        return self.loss.value(features.dot(weights), targets) + self.loss.penalty(weights)

    def train(self, data, config):
        """Fit the weights by mini-batch gradient descent, starting from zero.

        Every pass over the data ends with a check of the full training loss; the run stops once it changes by less
        than ``config.stop_criteria.abs_loss_change_tol``, after ``config.data_processing.repeat`` passes (if non-zero)
        or after ``config.stop_criteria.max_iterations`` steps, whichever comes first.

        :param data: training patterns
        :type data: :class:`dynatune.data_containers.DataSet` of ``(input, target)``
        :param config: training config
        :type config: :class:`dynatune.training.TrainingConfig`
        :raises: ModelStateException: if the model is closed, its loss has out of range parameters or the training loss
          became non-finite
        :raises: ValueError: if ``data`` is empty

        """
        self._check_open()
        invalid_parameters = self.loss.invalid_parameters()
        if invalid_parameters:
            raise ModelStateException('Cannot train with {0}.'.format('; '.join(invalid_parameters)))

        inputs, targets = data.to_arrays()
        self._target_ndim = targets.ndim
        targets = targets.reshape(targets.shape[0], -1)
        features = self._features(inputs)
        num_patterns = features.shape[0]

        data_processing = config.data_processing
        stop_criteria = config.stop_criteria
        batch_size = data_processing.batch_size or num_patterns

        weights = numpy.zeros((features.shape[1], targets.shape[1]))
        self.training_losses = []
        num_steps = 0
        num_passes = 0
        previous_loss = None

        with numpy.errstate(over='ignore', invalid='ignore'):
            while num_steps < stop_criteria.max_iterations:
                ordering = numpy.arange(num_patterns)
                if data_processing.shuffle_buffer > 0:
                    self._random_state.shuffle(ordering)

                for start in range(0, num_patterns, batch_size):
                    if num_steps >= stop_criteria.max_iterations:
                        break
                    batch = ordering[start:start + batch_size]
                    batch_features = features[batch]
                    gradient = self.loss.gradient(batch_features.dot(weights), targets[batch])
                    step = batch_features.T.dot(gradient) / batch.size + self.loss.l2 * weights
                    weights = weights - self.loss.learning_rate * step
                    num_steps += 1

                num_passes += 1
                training_loss = self._objective(features, targets, weights)
                if not numpy.isfinite(training_loss):
                    raise ModelStateException('Training diverged after {0:d} steps: loss = {1}'.format(num_steps, training_loss))
                self.training_losses.append(training_loss)

                if previous_loss is not None and numpy.fabs(training_loss - previous_loss) < stop_criteria.abs_loss_change_tol:
                    break
                if data_processing.repeat and num_passes >= data_processing.repeat:
                    break
                previous_loss = training_loss

        self._weights = weights
        self.log.debug('Trained for {0:d} steps ({1:d} passes), final loss {2}'.format(num_steps, num_passes, self.training_losses[-1] if self.training_losses else None))

    def predict(self, inputs):
        """Return the predictions for ``inputs``; shaped like the training targets (1D for scalar targets).

        :raises: ModelStateException: if the model is closed or untrained

        """
        self._check_trained()
        predictions = self._features(inputs).dot(self._weights)
        if self._target_ndim == 1:
            return predictions[:, 0]
        return predictions

    def evaluate(self, data, metrics, data_processing):
        """Compute each of ``metrics`` on the predictions for ``data``, predicted in batches of ``data_processing.batch_size``.

        :raises: ModelStateException: if the model is closed or untrained

        """
        self._check_trained()
        inputs, targets = data.to_arrays()
        batch_size = data_processing.batch_size or inputs.shape[0]
        predictions = numpy.concatenate([
            self.predict(inputs[start:start + batch_size])
            for start in range(0, inputs.shape[0], batch_size)
        ])
        return [metric(predictions, targets) for metric in metrics]

    def close(self):
        """Drop the trained weights; the model may not be used afterwards."""
        self._weights = None
        self._closed = True
