# -*- coding: utf-8 -*-
"""Model backends for :class:`dynatune.tunable_model.TunableModel`.

:mod:`dynatune.models.linear` is a small numpy model (linear in the features produced by an architecture from
:mod:`dynatune.models.architectures`, trained by mini-batch gradient descent on a loss from
:mod:`dynatune.models.losses`). Any other backend only needs to implement
:class:`dynatune.interfaces.model_interface.ModelInterface`.

"""
