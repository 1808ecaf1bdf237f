"""Error taxonomy for Flowpad.

All errors raised by the graph store, codec and persistence layer derive
from FlowpadError so that callers (the editor, the CLI) can report them as
non-fatal notifications.
"""


class FlowpadError(Exception):
    """Base class for all Flowpad errors."""


class GraphReferenceError(FlowpadError):
    """An operation referenced a node or edge id that is not in the store."""


class ValidationError(FlowpadError, ValueError):
    """A caller-supplied argument violates a precondition."""


class NotFoundError(FlowpadError, KeyError):
    """A named slot does not exist."""

    def __str__(self):
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


class DecodeError(FlowpadError, ValueError):
    """A persisted representation could not be decoded."""


class ExportError(FlowpadError):
    """Rendering a flowchart image failed."""
