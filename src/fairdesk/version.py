"""Single source of truth for the fairdesk version string."""

__version__: str = "0.3.0"
