"""Film negative tooling: Lanczos resizing, grading shader sources and parameters, render status and file dialogs."""

__version__ = "0.1.0"