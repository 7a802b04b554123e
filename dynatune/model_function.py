# -*- coding: utf-8 -*-
"""Model functions: factories building a fresh model (or training config) from a hyper-parameter configuration.

A *model function* takes a configuration ``h`` (dict of str -> float64) and returns an untrained
:class:`dynatune.interfaces.model_interface.ModelInterface`. A *model config function* takes ``h`` and returns the
:class:`dynatune.training.TrainingConfig` to train that model with. :class:`dynatune.tunable_model.TunableModel`
calls both once per energy evaluation.

The helpers below cover the usual ways of letting hyper-parameters reach a model: through its loss only
(:func:`from_loss_generator`), its architecture only (:func:`from_arch_generator`) or both
(:func:`from_arch_loss_generator`). A *model builder* is any callable ``model_builder(architecture, loss, **kwargs)``
returning a model, e.g., :class:`dynatune.models.linear.LinearModel`.

Each configuration gets its own summary directory, named by a token of the configuration
(:func:`hyper_params_to_dir`), so the state files of a tuning run do not overwrite each other.

"""
import hashlib
import os

from dynatune.constant import DEFAULT_DATA_OPS, DEFAULT_STOP_CRITERIA
from dynatune.training import TrainingConfig


def config_to_str(h):
    """Render a configuration as ``name_value`` pairs joined by ``-``, names in sorted order.

    For example, ``{'lr': 0.1, 'l2': 1}`` becomes ``'l2_1.0-lr_0.1'``.

    """
    return '-'.join('{0}_{1}'.format(key, float(h[key])) for key in sorted(h))


def generate_token(string):
    """Return the MD5 hex digest of ``string``."""
    return hashlib.md5(string.encode('utf-8')).hexdigest()


def to_token(h):
    """Return a token identifying the configuration ``h``; equal configurations share a token."""
    return generate_token(config_to_str(h))


def get_summary_dir(top_dir, h, create_working_dir=to_token):
    """Return the summary directory of the training run for configuration ``h``.

    :param top_dir: top level directory of the tuning run
    :type top_dir: str
    :param h: the configuration
    :type h: dict of str -> float64
    :param create_working_dir: names the per-configuration sub-directory; None to use ``top_dir`` itself
    :type create_working_dir: callable taking ``h`` and returning a str, or None
    :return: path of the summary directory (not created here)
    :rtype: str

    """
    if create_working_dir is None:
        return top_dir
    return os.path.join(top_dir, create_working_dir(h))


def hyper_params_to_dir(top_dir, create_working_dir=to_token):
    """Return a function mapping a configuration to its summary directory under ``top_dir``."""
    def summary_dir(h):
        """Return the summary directory of the configuration ``h``."""
        return get_summary_dir(top_dir, h, create_working_dir=create_working_dir)

    return summary_dir


def training_config_function(top_dir, data_processing=DEFAULT_DATA_OPS, stop_criteria=DEFAULT_STOP_CRITERIA, create_working_dir=to_token):
    """Return a model config function giving each configuration its own summary directory under ``top_dir``.

    :param top_dir: top level directory of the tuning run
    :type top_dir: str
    :param data_processing: training data pipeline, shared by all configurations
    :type data_processing: :class:`dynatune.training.DataOps`
    :param stop_criteria: termination conditions, shared by all configurations
    :type stop_criteria: :class:`dynatune.training.StopCriteria`
    :param create_working_dir: see :func:`get_summary_dir`
    :return: model config function
    :rtype: callable taking ``h`` and returning a :class:`dynatune.training.TrainingConfig`

    """
    summary_dir = hyper_params_to_dir(top_dir, create_working_dir=create_working_dir)

    def model_config_function(h):
        """Return the training config of the configuration ``h``."""
        return TrainingConfig(
            summary_dir=summary_dir(h),
            data_processing=data_processing,
            stop_criteria=stop_criteria,
        )

    return model_config_function


def from_loss_generator(loss_generator, architecture, model_builder, **model_kwargs):
    """Create a model function whose hyper-parameters only reach the loss.

    :param loss_generator: builds the loss from the configuration
    :type loss_generator: callable taking ``h``
    :param architecture: the model architecture, shared by all configurations
    :param model_builder: builds a model from ``(architecture, loss, **model_kwargs)``
    :type model_builder: callable
    :return: model function
    :rtype: callable taking ``h`` and returning a model

    """
    def model_function(h):
        """Build the model of the configuration ``h``."""
        return model_builder(architecture, loss_generator(h), **model_kwargs)

    return model_function


def from_arch_loss_generator(arch_loss_generator, model_builder, **model_kwargs):
    """Create a model function whose hyper-parameters reach both the architecture and the loss.

    :param arch_loss_generator: builds an ``(architecture, loss)`` tuple from the configuration
    :type arch_loss_generator: callable taking ``h``
    :param model_builder: builds a model from ``(architecture, loss, **model_kwargs)``
    :type model_builder: callable
    :return: model function
    :rtype: callable taking ``h`` and returning a model

    """
    def model_function(h):
        """Build the model of the configuration ``h``."""
        architecture, loss = arch_loss_generator(h)
        return model_builder(architecture, loss, **model_kwargs)

    return model_function


def from_arch_generator(arch_generator, loss, model_builder, **model_kwargs):
    """Create a model function whose hyper-parameters only reach the architecture.

    :param arch_generator: builds the architecture from the configuration
    :type arch_generator: callable taking ``h``
    :param loss: the loss, shared by all configurations
    :param model_builder: builds a model from ``(architecture, loss, **model_kwargs)``
    :type model_builder: callable
    :return: model function
    :rtype: callable taking ``h`` and returning a model

    """
    def model_function(h):
        """Build the model of the configuration ``h``."""
        return model_builder(arch_generator(h), loss, **model_kwargs)

    return model_function
