# -*- coding: utf-8 -*-
"""Exception types raised by dynatune.

All of them derive from :class:`TuningException`, so callers can catch everything the library raises with one clause.
Exceptions that describe bad user input also derive from ``ValueError``.

"""


class TuningException(Exception):

    """Base class for exceptions raised by dynatune."""

    pass


class ModelStateException(TuningException):

    """A model was asked to do something its current state forbids.

    Examples: training diverged (non-finite loss), predicting before training, using a closed model.

    :meth:`dynatune.tunable_model.TunableModel.energy` treats these as expected failures of a configuration and logs
    them without a traceback.

    """

    pass


class MissingHyperParameterException(TuningException, ValueError):

    """A hyper-parameter configuration does not assign a value to every declared hyper-parameter."""

    def __init__(self, hyper_parameters, config):
        """Construct the exception from the declared hyper-parameter names and the offending configuration."""
        self.missing = [name for name in hyper_parameters if name not in config]
        super(MissingHyperParameterException, self).__init__(
            'All hyper-parameters: {0} of the model must be contained in the configuration; missing {1}'.format(
                list(hyper_parameters),
                self.missing,
            ),
        )


class DataSplitException(TuningException, ValueError):

    """Neither validation data nor a function to split the training data was provided."""

    pass
