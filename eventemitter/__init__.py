from eventemitter.lib.events import Binding, EventEmitter, attach
from eventemitter.version import __version__

PACKAGE = __package__
VERSION = __version__

__all__ = [
    "VERSION",
    "PACKAGE",
    Binding.__name__,
    EventEmitter.__name__,
    attach.__name__,
]
