# -*- coding: utf-8 -*-
"""Tests for dynatune."""
