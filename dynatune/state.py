# -*- coding: utf-8 -*-
"""Persistence of evaluated hyper-parameter configurations.

Every energy evaluation of a :class:`dynatune.tunable_model.TunableModel` leaves a ``state.json`` in the summary
directory of its training run::

  {"comment": "", "energy": 0.42, "l2": 0.01, "learning_rate": 0.1}

With one summary directory per configuration (see :func:`dynatune.model_function.hyper_params_to_dir`), the top
level directory of a tuning run ends up holding the whole explored energy landscape; :func:`collect_states` and
:func:`best_state` read it back, e.g., to inspect or resume a run.

"""
import collections
import glob
import logging
import os
import pprint

import simplejson as json

from dynatune.constant import COMMENT_KEY, ENERGY_KEY, RESERVED_STATE_KEYS, STATE_FILE_NAME
from dynatune.schemas import StateRecordSchema

log = logging.getLogger(__name__)


# See StateRecord (below) for docstring.
_BaseStateRecord = collections.namedtuple('_BaseStateRecord', [
    'hyper_parameters',
    'energy',
    'comment',
    'summary_dir',
])


class StateRecord(_BaseStateRecord):

    """A hyper-parameter configuration together with its energy, as read from a state file.

    :ivar hyper_parameters: (*dict of str -> float64*) the configuration
    :ivar energy: (*float64*) energy of the configuration; ``inf`` if training failed
    :ivar comment: (*str*) failure message, empty for a successful training
    :ivar summary_dir: (*str*) directory the state file was read from

    """

    __slots__ = ()

    def __str__(self):
        """Pretty print this object as a dict."""
        return pprint.pformat(dict(self._asdict()))

    @property
    def failed(self):
        """Return True if the training behind this record failed."""
        return bool(self.comment)


def state_file_path(summary_dir):
    """Return the path of the state file inside ``summary_dir``."""
    return os.path.join(summary_dir, STATE_FILE_NAME)


def write_state(summary_dir, h, energy, comment=''):
    """Write the configuration ``h`` and its energy to the state file of ``summary_dir``.

    ``summary_dir`` (and its parents) are created as needed; an existing state file is overwritten.
    Infinite energies are written as ``Infinity`` (json extension understood by :func:`read_state`).

    :param summary_dir: directory of the training run
    :type summary_dir: str
    :param h: the configuration
    :type h: dict of str -> float64
    :param energy: energy of ``h``
    :type energy: float64
    :param comment: failure message, empty for a successful training
    :type comment: str
    :return: path of the state file
    :rtype: str

    """
    # energy and comment replace any entries of h under the same keys
    record = dict((key, float(value)) for key, value in h.items() if key not in RESERVED_STATE_KEYS)
    record[ENERGY_KEY] = float(energy)
    record[COMMENT_KEY] = comment

    if not os.path.isdir(summary_dir):
        os.makedirs(summary_dir)

    path = state_file_path(summary_dir)
    with open(path, 'w') as state_file:
        json.dump(record, state_file, sort_keys=True, allow_nan=True)

    log.debug('Wrote state file {0}'.format(path))
    return path


def read_state(path):
    """Read a state file written by :func:`write_state`.

    :param path: path of the state file, or of the summary directory holding it
    :type path: str
    :return: the configuration and its energy
    :rtype: StateRecord
    :raises: colander.Invalid: if the file content is not a valid state record
    :raises: simplejson.JSONDecodeError: if the file is not json

    """
    if os.path.isdir(path):
        path = state_file_path(path)

    with open(path) as state_file:
        raw_record = json.load(state_file, allow_nan=True)

    record = StateRecordSchema().deserialize(raw_record)
    hyper_parameters = dict(
        (key, float(value)) for key, value in record.items() if key not in RESERVED_STATE_KEYS
    )
    return StateRecord(
        hyper_parameters=hyper_parameters,
        energy=record[ENERGY_KEY],
        comment=record[COMMENT_KEY],
        summary_dir=os.path.dirname(os.path.abspath(path)),
    )


def collect_states(top_dir):
    """Read every state file of a tuning run, least energy first.

    Looks at ``top_dir/state.json`` and ``top_dir/*/state.json``: the layout produced by
    :func:`dynatune.model_function.hyper_params_to_dir`. Ties in energy are broken by summary directory.

    :param top_dir: top level directory of the tuning run
    :type top_dir: str
    :return: the records, sorted by energy
    :rtype: list of StateRecord

    """
    paths = glob.glob(state_file_path(top_dir)) + glob.glob(os.path.join(top_dir, '*', STATE_FILE_NAME))
    records = [read_state(path) for path in paths]
    return sorted(records, key=lambda record: (record.energy, record.summary_dir))


def best_state(top_dir):
    """Return the least energy StateRecord of a tuning run; None if no state file exists."""
    records = collect_states(top_dir)
    if not records:
        return None
    return records[0]
