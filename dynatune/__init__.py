# -*- coding: utf-8 -*-
"""Hyper-parameter tuning of trainable models through global optimization of a validation energy."""


#: Following the versioning system at http://semver.org/
#: MAJOR: incremented for incompatible API changes
MAJOR = 0
#: MINOR: incremented for adding functionality in a backwards-compatible manner
MINOR = 1
#: PATCH: incremented for backward-compatible bug fixes and minor capability improvements
PATCH = 0
#: Latest release version of dynatune
__version__ = "{0:d}.{1:d}.{2:d}".format(MAJOR, MINOR, PATCH)
