"""A full-screen console shell that runs commands with bash and keeps a scrollable history."""

__version__ = "0.1.0"