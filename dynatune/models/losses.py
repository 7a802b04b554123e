# -*- coding: utf-8 -*-
r"""Losses for :class:`dynatune.models.linear.LinearModel`.

A loss carries its own optimization settings (``learning_rate``, ``l2`` penalty), so that a loss generator
(see :func:`dynatune.model_function.from_loss_generator`) is the single place where those hyper-parameters enter a model.

For ``n`` predictions ``p_i`` with targets ``y_i``:

* :meth:`value` is the data term ``\frac{1}{n} \sum_i \ell(p_i, y_i)`` (the ``l2`` penalty is added by the model),
* :meth:`gradient` returns the per-sample derivatives ``\pderiv{\ell(p_i, y_i)}{p_i}``.

"""
import numpy


class _PenalizedLoss(object):

    """Common parameters of the losses: learning rate and l2 penalty."""

    def __init__(self, learning_rate, l2=0.0):
        """Construct a loss.

        Parameters are range-checked by :meth:`invalid_parameters` when a model trains with this loss, so that any
        configuration a search proposes can be turned into a loss.

        :param learning_rate: gradient descent step size
        :type learning_rate: float64 > 0.0
        :param l2: weight of the ``0.5 * l2 * |w|^2`` penalty on the model weights
        :type l2: float64 >= 0.0

        """
        self.learning_rate = float(learning_rate)
        self.l2 = float(l2)

    def invalid_parameters(self):
        """Describe every parameter of this loss that is out of range.

        :return: one message per invalid parameter; empty if this loss can be trained with
        :rtype: list of str

        """
        messages = []
        if not self.learning_rate > 0.0:
            messages.append('learning_rate = {0} must be positive'.format(self.learning_rate))
        if not self.l2 >= 0.0:
            messages.append('l2 = {0} must be non-negative'.format(self.l2))
        return messages

    def penalty(self, weights):
        """Return the l2 penalty of ``weights``."""
        return 0.5 * self.l2 * float(numpy.sum(weights * weights))


class SquaredLoss(_PenalizedLoss):

    r"""``\ell(p, y) = 0.5 * |p - y|^2``."""

    def value(self, predictions, targets):
        """Return the mean squared loss of ``predictions``, arrays of shape (n, num_targets)."""
        residuals = predictions - targets
        return 0.5 * float(numpy.mean(numpy.sum(residuals * residuals, axis=1)))

    def gradient(self, predictions, targets):
        """Return the per-sample derivative of the loss wrt ``predictions``."""
        return predictions - targets


class HuberLoss(_PenalizedLoss):

    r"""Quadratic for residuals up to ``delta``, linear beyond: ``0.5 r^2`` if ``|r| <= delta``, else ``delta (|r| - 0.5 delta)``."""

    def __init__(self, learning_rate, delta=1.0, l2=0.0):
        """Construct a HuberLoss; see :class:`_PenalizedLoss` for ``learning_rate`` and ``l2``.

        :param delta: residual magnitude where the loss turns linear
        :type delta: float64 > 0.0

        """
        super(HuberLoss, self).__init__(learning_rate, l2=l2)
        self.delta = float(delta)

    def invalid_parameters(self):
        """Describe every parameter of this loss that is out of range; see :meth:`_PenalizedLoss.invalid_parameters`."""
        messages = super(HuberLoss, self).invalid_parameters()
        if not self.delta > 0.0:
            messages.append('delta = {0} must be positive'.format(self.delta))
        return messages

    def value(self, predictions, targets):
        """Return the mean Huber loss of ``predictions``, arrays of shape (n, num_targets)."""
        residuals = numpy.fabs(predictions - targets)
        per_entry = numpy.where(
            residuals <= self.delta,
            0.5 * residuals * residuals,
            self.delta * (residuals - 0.5 * self.delta),
        )
        return float(numpy.mean(numpy.sum(per_entry, axis=1)))

    def gradient(self, predictions, targets):
        """Return the per-sample derivative of the loss wrt ``predictions``."""
        return numpy.clip(predictions - targets, -self.delta, self.delta)
