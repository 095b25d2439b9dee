"""Error taxonomy shared by the sampling kernel, graph store and generators."""


class GraphInputError(Exception):
    """Base class for every error raised by the generator library."""


class InvalidArgument(GraphInputError, ValueError):
    """Raised when a scalar argument is out of its allowed range."""


class StructuralPrecondition(GraphInputError, ValueError):
    """Raised when a graph operation is applied to nodes or graphs it cannot accept.

    Examples: a node that is not a member of the graph being mutated, an
    empty replacement graph, or merge segments of different sizes.
    """


class InternalInvariantViolation(GraphInputError, AssertionError):
    """Raised when the graph store detects corrupted internal state.

    A lone half of a mirrored edge is the typical cause. This signals a
    programming error and is never caught inside the library.
    """
