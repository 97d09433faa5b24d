"""Use cases específicos de Alexa Smart Home."""

from .dispatch_directive import DirectiveDispatcher

__all__ = [
    "DirectiveDispatcher",
]
