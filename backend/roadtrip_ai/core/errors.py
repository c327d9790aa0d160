class RoadtripError(Exception):
    """Base class for errors raised by the assistant pipeline."""


class ValidationRejection(RoadtripError):
    """The query is off-domain or asks for a duration we refuse to plan."""


class GenerationFailure(RoadtripError):
    """The generation backend failed or returned something unusable."""


class PersistenceFailure(RoadtripError):
    """Saving or loading conversation messages failed."""
