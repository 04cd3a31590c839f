"""
Exception types for generation and project operations.
"""


class LandingWiseError(Exception):
    """Base class for all LandingWise errors."""


class GenerationError(LandingWiseError):
    """A generation step could not produce content."""


class GenerationTransportError(GenerationError):
    """The text-generation endpoint could not be reached or returned non-2xx."""


class MalformedResponseError(GenerationError):
    """The text-generation endpoint answered with an unexpected payload shape."""


class WorkflowCancelledError(GenerationError):
    """The caller cancelled the run or its deadline passed."""


class ProjectNotFoundError(LandingWiseError):
    """Unknown project id, or the project belongs to another owner."""


class PublishError(LandingWiseError):
    """The project cannot be published in its current state."""
