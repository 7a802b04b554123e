# -*- coding: utf-8 -*-
"""Tests for the global optimizers in :mod:`dynatune.optimization`."""
