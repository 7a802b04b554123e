# -*- coding: utf-8 -*-
"""Interfaces for the components of a tuning run: globally optimizable systems, trainable models and global optimizers.

Implementations live in :mod:`dynatune.tunable_model`, :mod:`dynatune.models` and :mod:`dynatune.optimization`.

"""
