# -*- coding: utf-8 -*-
"""Data containers convenient for/used to interact with dynatune members."""
import collections
import pprint

import numpy


# See DataSplit (below) for docstring.
_BaseDataSplit = collections.namedtuple('_BaseDataSplit', [
    'training',
    'validation',
])


class DataSplit(_BaseDataSplit):

    """A training/validation pair of :class:`DataSet`.

    :ivar training: (*DataSet*) patterns the model is fit on
    :ivar validation: (*DataSet*) held-out patterns the fitness of the model is measured on

    """

    __slots__ = ()


class DataSet(object):

    """An immutable, ordered collection of patterns.

    A pattern can be anything: a raw record, an ``(input, target)`` tuple, etc. Transformations (``map``, ``filter``,
    ``partition``) return new data sets and never modify this one.

    :ivar _data: (*tuple*) the patterns, in order

    """

    __slots__ = ('_data', )

    def __init__(self, data=None):
        """Create a DataSet holding the patterns of ``data``.

        :param data: the patterns; None for an empty data set
        :type data: iterable

        """
        if data is None:
            data = ()
        self._data = tuple(data)

    def __str__(self):
        """Pretty print the patterns of this data set."""
        return pprint.pformat(list(self._data))

    def __repr__(self):
        """Return a short description of this data set."""
        return 'DataSet(size={0:d})'.format(self.size)

    def __len__(self):
        """Return the number of patterns."""
        return len(self._data)

    def __iter__(self):
        """Iterate over the patterns in order."""
        return iter(self._data)

    def __getitem__(self, index):
        """Return the pattern (or a DataSet of the patterns, for a slice) at ``index``."""
        if isinstance(index, slice):
            return DataSet(self._data[index])
        return self._data[index]

    def __eq__(self, other):
        """Two data sets are equal if they hold equal patterns in the same order."""
        if not isinstance(other, DataSet):
            return NotImplemented
        return self._data == other._data

    def __ne__(self, other):
        """Negation of :meth:`__eq__`."""
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    @property
    def size(self):
        """Return the number of patterns."""
        return len(self._data)

    @property
    def data(self):
        """Return the patterns as a list."""
        return list(self._data)

    def map(self, func):
        """Return a DataSet of ``func(pattern)`` for every pattern."""
        return DataSet(func(pattern) for pattern in self._data)

    def filter(self, predicate):
        """Return a DataSet of the patterns for which ``predicate`` is true."""
        return DataSet(pattern for pattern in self._data if predicate(pattern))

    def filter_not(self, predicate):
        """Return a DataSet of the patterns for which ``predicate`` is false."""
        return DataSet(pattern for pattern in self._data if not predicate(pattern))

    def partition(self, predicate):
        """Split this data set in two; the order of the patterns is preserved in both halves.

        :param predicate: decides the half a pattern lands in
        :type predicate: callable returning bool
        :return: patterns where ``predicate`` is true as ``training``, the rest as ``validation``
        :rtype: DataSplit

        """
        training = []
        validation = []
        for pattern in self._data:
            if predicate(pattern):
                training.append(pattern)
            else:
                validation.append(pattern)
        return DataSplit(training=DataSet(training), validation=DataSet(validation))

    def to_arrays(self):
        """Stack ``(input, target)`` patterns into arrays.

        Inputs that are scalars become rows of length 1, so the returned inputs are always 2D.

        :return: (inputs, targets)
        :rtype: tuple: (array of float64 with shape (size, input_dim), array of float64 with shape (size, ...))
        :raises: ValueError: if the data set is empty

        """
        if self.size == 0:
            raise ValueError('Cannot convert an empty DataSet to arrays.')

        inputs = numpy.array([pattern[0] for pattern in self._data], dtype=numpy.float64)
        targets = numpy.array([pattern[1] for pattern in self._data], dtype=numpy.float64)
        if inputs.ndim == 1:
            inputs = inputs.reshape(-1, 1)
        return inputs, targets
