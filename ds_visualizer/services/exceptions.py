"""
Service Layer Exceptions

Errors raised by the structure engines and the visualizer service.
Engine operations raise them; StructureEngine.execute() turns them into
console log entries so a failed command never escapes to the dispatcher.
"""


class VisualizerError(Exception):
    """Base class for every user-facing command failure."""

    @property
    def kind(self) -> str:
        return type(self).__name__


class EmptyContainerError(VisualizerError):
    """Raised when reading or removing from an empty structure."""
    pass


class ValueNotFoundError(VisualizerError):
    """Raised when search/remove cannot find the requested value."""
    pass


class InvalidArgumentError(VisualizerError):
    """Raised when a command is missing its required operands."""
    pass


class UnknownCommandError(VisualizerError):
    """Raised when a verb is not part of the structure's vocabulary."""
    pass


class StepperBusyError(VisualizerError):
    """Raised when a run is submitted while another run is still active."""
    pass


class UnknownStructureError(VisualizerError):
    """Raised when the service is asked for a structure it does not host."""
    pass
