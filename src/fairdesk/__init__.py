"""fairdesk — career-fair company roster assistant.

Text commands in, a persisted roster out, with a strict layered
architecture separating parsing, execution, storage and presentation.
"""

from fairdesk.version import __version__

__all__: list[str] = ["__version__"]
