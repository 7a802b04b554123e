# -*- coding: utf-8 -*-
"""Containers describing how a model is trained and evaluated: data processing, stopping and performance metrics."""
import collections


# See DataOps (below) for docstring.
_BaseDataOps = collections.namedtuple('_BaseDataOps', [
    'shuffle_buffer',
    'batch_size',
    'repeat',
])


class DataOps(_BaseDataOps):

    """Container for the data processing pipeline applied to a data set before it reaches the model.

    Evaluation of a tuned model never shuffles or repeats; see :meth:`DataOps.for_evaluation`.

    :ivar shuffle_buffer: (*int >= 0*) shuffle the patterns each pass when positive; 0 to keep the data order
    :ivar batch_size: (*int >= 0*) number of patterns per mini-batch; 0 for the full data set
    :ivar repeat: (*int >= 0*) number of passes (epochs) over the training data; 0 repeats until the stop criteria end
        the run. Evaluation always makes a single pass.

    """

    __slots__ = ()

    def for_evaluation(self):
        """Return a copy of these ops with shuffling and repetition disabled."""
        return self._replace(shuffle_buffer=0, repeat=0)


# See StopCriteria (below) for docstring.
_BaseStopCriteria = collections.namedtuple('_BaseStopCriteria', [
    'max_iterations',
    'abs_loss_change_tol',
])


class StopCriteria(_BaseStopCriteria):

    """Container for the conditions that end a training run.

    :ivar max_iterations: (*int > 0*) maximum number of optimization steps (mini-batches) over the whole run
    :ivar abs_loss_change_tol: (*float64 >= 0.0*) stop once the training loss of consecutive passes changes less than this

    """

    __slots__ = ()


# See TrainingConfig (below) for docstring.
_BaseTrainingConfig = collections.namedtuple('_BaseTrainingConfig', [
    'summary_dir',
    'data_processing',
    'stop_criteria',
])


class TrainingConfig(_BaseTrainingConfig):

    """Container for everything a model needs to know to train, other than the data and the hyper-parameters.

    :ivar summary_dir: (*str*) directory holding the artifacts of this training run (e.g., ``state.json``)
    :ivar data_processing: (*DataOps*) data pipeline for training
    :ivar stop_criteria: (*StopCriteria*) termination conditions

    """

    __slots__ = ()


# See Performance (below) for docstring.
_BasePerformance = collections.namedtuple('_BasePerformance', [
    'name',
    'metric',
])


class Performance(_BasePerformance):

    """A named performance metric.

    :ivar name: (*str*) name of the metric, used in log lines
    :ivar metric: (*callable*) ``metric(predictions, targets)`` returning a float64

    """

    __slots__ = ()

    def __call__(self, predictions, targets):
        """Compute the metric on the given predictions and targets."""
        return float(self.metric(predictions, targets))
