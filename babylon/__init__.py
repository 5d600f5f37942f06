"""A small game engine skeleton: window loop, logger, user paths, config values and monitor discovery."""

__version__ = "0.1.1"