# -*- coding: utf-8 -*-
"""Colander schemas validating the dict inputs of dynatune: optimizer parameters and state files.

.. Warning:: Outputs of colander schema serialization/deserialization should be treated as
  READ-ONLY. It appears that "missing=" and "default=" value are weak-copied (by reference).
  Thus changing missing/default fields in the output dict can modify the schema!

"""
import numbers

import colander

from dynatune.constant import COMMENT_KEY, CSA_VARIANTS, DEFAULT_COUPLED_SIMULATED_ANNEALING_PARAMETERS, DEFAULT_GRID_SEARCH_PARAMETERS, DEFAULT_LBFGSB_PARAMETERS, DEFAULT_RANDOM_SEARCH_PARAMETERS, ENERGY_KEY


class StrictMappingSchema(colander.MappingSchema):

    """A ``colander.MappingSchema`` that raises exceptions when asked to serialize/deserialize unknown keys.

    .. Note:: by default, colander.MappingSchema ignores/throws out unknown keys.

    """

    def schema_type(self, **kw):
        """Set MappingSchema to raise ``colander.Invalid`` when serializing/deserializing unknown keys.

        This overrides the staticmethod of the same name in ``colander._SchemaNode``.
        ``schema_type`` encodes the same information as the ``typ`` ctor argument to
        ``colander.SchemaNode``
        See: http://colander.readthedocs.org/en/latest/api.html#colander.SchemaNode

        .. Note:: Passing ``typ`` or setting ``schema_type`` in subclasses will ***override*** this!

        """
        return colander.Mapping(unknown='raise')


class PositiveFloat(colander.SchemaNode):

    """Colander positive (finite) float."""

    schema_type = colander.Float
    title = 'Positive Float'

    def validator(self, node, cstruct):
        """Raise an exception if the node value (cstruct) is non-positive or non-finite.

        :param node: the node being validated (usually self)
        :type node: colander.SchemaNode subclass instance
        :param cstruct: the value being validated
        :type cstruct: float
        :raise: colander.Invalid if cstruct value is bad

        """
        if not 0.0 < cstruct < float('inf'):
            raise colander.Invalid(node, msg='Value = {0:f} must be positive and finite.'.format(cstruct))


class GridSearchParametersSchema(StrictMappingSchema):

    """Parameters of :class:`dynatune.optimization.grid_search.GridSearch`.

    See :class:`dynatune.optimization.parameters.GridSearchParameters` for the meaning of each field.
    Missing fields take their values from :data:`dynatune.constant.DEFAULT_GRID_SEARCH_PARAMETERS`.

    """

    grid_size = colander.SchemaNode(
            colander.Int(),
            missing=DEFAULT_GRID_SEARCH_PARAMETERS.grid_size,
            validator=colander.Range(min=1),
            )
    step_size = PositiveFloat(
            missing=DEFAULT_GRID_SEARCH_PARAMETERS.step_size,
            )
    log_scale = colander.SchemaNode(
            colander.Boolean(),
            missing=DEFAULT_GRID_SEARCH_PARAMETERS.log_scale,
            )


class RandomSearchParametersSchema(StrictMappingSchema):

    """Parameters of :class:`dynatune.optimization.random_search.RandomSearch`."""

    num_samples = colander.SchemaNode(
            colander.Int(),
            missing=DEFAULT_RANDOM_SEARCH_PARAMETERS.num_samples,
            validator=colander.Range(min=1),
            )
    log_scale = colander.SchemaNode(
            colander.Boolean(),
            missing=DEFAULT_RANDOM_SEARCH_PARAMETERS.log_scale,
            )


class CoupledSimulatedAnnealingParametersSchema(StrictMappingSchema):

    """Parameters of :class:`dynatune.optimization.coupled_simulated_annealing.CoupledSimulatedAnnealing`."""

    grid_size = colander.SchemaNode(
            colander.Int(),
            missing=DEFAULT_COUPLED_SIMULATED_ANNEALING_PARAMETERS.grid_size,
            validator=colander.Range(min=1),
            )
    step_size = PositiveFloat(
            missing=DEFAULT_COUPLED_SIMULATED_ANNEALING_PARAMETERS.step_size,
            )
    log_scale = colander.SchemaNode(
            colander.Boolean(),
            missing=DEFAULT_COUPLED_SIMULATED_ANNEALING_PARAMETERS.log_scale,
            )
    max_iterations = colander.SchemaNode(
            colander.Int(),
            missing=DEFAULT_COUPLED_SIMULATED_ANNEALING_PARAMETERS.max_iterations,
            validator=colander.Range(min=0),
            )
    variant = colander.SchemaNode(
            colander.String(),
            missing=DEFAULT_COUPLED_SIMULATED_ANNEALING_PARAMETERS.variant,
            validator=colander.OneOf(CSA_VARIANTS),
            )
    generation_temperature = PositiveFloat(
            missing=DEFAULT_COUPLED_SIMULATED_ANNEALING_PARAMETERS.generation_temperature,
            )
    acceptance_temperature = PositiveFloat(
            missing=DEFAULT_COUPLED_SIMULATED_ANNEALING_PARAMETERS.acceptance_temperature,
            )


class LBFGSBParametersSchema(StrictMappingSchema):

    """Parameters of :class:`dynatune.optimization.lbfgsb.LBFGSBLocalSearch`."""

    max_func_evals = colander.SchemaNode(
            colander.Int(),
            missing=DEFAULT_LBFGSB_PARAMETERS.max_func_evals,
            validator=colander.Range(min=1),
            )
    max_metric_correc = colander.SchemaNode(
            colander.Int(),
            missing=DEFAULT_LBFGSB_PARAMETERS.max_metric_correc,
            validator=colander.Range(min=1),
            )
    factr = colander.SchemaNode(
            colander.Float(),
            missing=DEFAULT_LBFGSB_PARAMETERS.factr,
            validator=colander.Range(min=1.0),
            )
    pgtol = PositiveFloat(
            missing=DEFAULT_LBFGSB_PARAMETERS.pgtol,
            )
    epsilon = PositiveFloat(
            missing=DEFAULT_LBFGSB_PARAMETERS.epsilon,
            )
    failure_penalty = colander.SchemaNode(
            colander.Float(),
            missing=DEFAULT_LBFGSB_PARAMETERS.failure_penalty,
            )


class StateRecordSchema(colander.MappingSchema):

    """The contents of a state file written by :func:`dynatune.state.write_state`.

    **Required fields**

        :ivar energy: (*float64*) energy of the configuration; ``Infinity`` for a failed training

    **Optional fields**

        :ivar comment: (*str*) failure message, empty for a successful training

    Every other key is a hyper-parameter and must hold a number. Unknown keys are preserved (not deserialized) by
    this schema; :func:`dynatune.state.read_state` converts them to float64.

    **Example Minimal Request**

    .. sourcecode:: http

        {
            "learning_rate": 0.1,
            "energy": 0.42,
            "comment": ""
        }

    """

    energy = colander.SchemaNode(colander.Float(), name=ENERGY_KEY)
    comment = colander.SchemaNode(colander.String(), name=COMMENT_KEY, missing='')

    def schema_type(self, **kw):
        """Keep the hyper-parameter keys, which this schema does not declare."""
        return colander.Mapping(unknown='preserve')

    def validator(self, node, cstruct):
        """Raise an exception if a hyper-parameter value is not a number.

        :param node: the node being validated (usually self)
        :type node: colander.SchemaNode subclass instance
        :param cstruct: the deserialized state record
        :type cstruct: dict
        :raise: colander.Invalid if a hyper-parameter value is bad

        """
        for key, value in cstruct.items():
            if key in (ENERGY_KEY, COMMENT_KEY):
                continue
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise colander.Invalid(node, msg='Hyper-parameter {0} = {1!r} must be a number.'.format(key, value))
