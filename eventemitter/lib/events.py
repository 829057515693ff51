"""Named event handler registry that can be attached to any host object."""

from __future__ import annotations

import functools
import logging
import types
from typing import Any, Callable

logger = logging.getLogger(__name__)

# Methods attach() installs on a host, primary names first.
EMITTER_METHODS = ("bind", "on", "once", "unbind", "off", "un", "dispatch", "trigger", "emit")


class Binding:
    """One handler registered under an event name.

    ``handler`` is the callable the caller passed in and is what unbind and
    rebind compare against. ``callback`` is what dispatch actually calls.
    """

    def __init__(self, handler: Callable, scope: Any = None, once: bool = False) -> None:
        self.handler = handler
        self.scope = scope
        self.callback = _apply_scope(handler, scope)
        self.once = once
        self.removed = False

    def matches(self, handler: Callable) -> bool:
        """Check whether ``handler`` is the callable this binding was registered with.

        Every ``obj.method`` access builds a new bound method, so two bound
        methods count as the same handler when they wrap the same function
        on the same object.
        """
        if self.handler is handler:
            return True
        own_self = getattr(self.handler, "__self__", None)
        if own_self is None or own_self is not getattr(handler, "__self__", None):
            return False
        if isinstance(self.handler, types.MethodType) and isinstance(handler, types.MethodType):
            return self.handler.__func__ is handler.__func__
        if isinstance(self.handler, types.BuiltinMethodType) and isinstance(handler, types.BuiltinMethodType):
            return self.handler.__name__ == handler.__name__
        return False

    def __repr__(self) -> str:
        return f"Binding(handler={self.handler!r}, scope={self.scope!r}, once={self.once})"


def _apply_scope(handler: Callable, scope: Any) -> Callable:
    """Fix the invocation context of a handler.

    Plain functions receive the scope the way methods receive self. Anything
    else (bound methods, builtins, callable objects) gets it as a leading
    positional argument.
    """
    if scope is None:
        return handler
    if isinstance(handler, types.FunctionType):
        return types.MethodType(handler, scope)
    return functools.partial(handler, scope)


class EventEmitter:
    """Registry of named event handlers.

    Handlers run synchronously in registration order; exceptions bubble up
    normally and stop the rest of the dispatch. Every mutating method returns
    the host object (or the emitter itself when standalone) so calls chain.

    Dispatch iterates over a snapshot of the bindings taken when it starts.
    Handlers bound during a dispatch first fire on the next one, and handlers
    unbound during a dispatch still receive the current one.
    Fire-once handlers are the exception: one that was removed before the
    sweep reached it, by a nested dispatch of the same event or by unbind,
    is skipped so it never runs twice.

    Not thread-safe: hosts that share an emitter across threads must hold
    their own lock around calls.
    """

    def __init__(self, host: object | None = None) -> None:
        self._handlers: dict[str, list[Binding]] = {}
        self._host = host if host is not None else self

    def _find(self, name: str, handler: Callable) -> Binding | None:
        for binding in self._handlers.get(name, []):
            if binding.matches(handler):
                return binding
        return None

    def _register(self, name: str, handler: Callable, scope: Any, once: bool) -> object:
        if not callable(handler):
            raise TypeError(f"Event handler for '{name}' must be callable, got {type(handler).__name__}")

        existing = self._find(name, handler)
        if existing is not None:
            existing.once = once
            logger.debug(f"Updated handler {handler!r} for event '{name}' (once={once})")
            return self._host

        self._handlers.setdefault(name, []).append(Binding(handler, scope, once))
        logger.debug(f"Bound handler {handler!r} to event '{name}' (once={once})")
        return self._host

    def bind(self, name: str, handler: Callable, scope: Any = None) -> object:
        """Register a handler for an event.

        Binding a handler that is already registered under ``name`` does not
        add a second entry; it only makes the existing one persistent.

        Args:
            name: Event name, matched exactly.
            handler: Callable invoked with the dispatch arguments.
            scope: Optional object fixed as the handler's invocation context.

        Returns:
            The host object, for chaining.

        Raises:
            TypeError: If handler is not callable.
        """
        return self._register(name, handler, scope, once=False)

    def once(self, name: str, handler: Callable, scope: Any = None) -> object:
        """Register a handler that is removed after the next dispatch of ``name``.

        If the handler is already registered under ``name`` it is switched to
        fire-once instead of being added again.
        """
        return self._register(name, handler, scope, once=True)

    def unbind(self, name: str, handler: Callable) -> object:
        """Remove a handler. Unknown names and handlers are ignored.

        ``handler`` must be the object passed to bind or once, or the same
        method looked up again on the same instance.
        """
        binding = self._find(name, handler)
        if binding is not None:
            binding.removed = True
            self._handlers[name].remove(binding)
            if not self._handlers[name]:
                del self._handlers[name]
            logger.debug(f"Unbound handler {handler!r} from event '{name}'")
        return self._host

    def dispatch(self, name: str, *args, **kwargs) -> object:
        """Call all handlers registered for this event, then drop the fire-once ones."""
        bindings = tuple(self._handlers.get(name, ()))
        if not bindings:
            logger.debug(f"No handlers bound to event '{name}'")
            return self._host

        for binding in bindings:
            if binding.once and binding.removed:
                continue
            binding.callback(*args, **kwargs)

        self._remove_fired_once(name, bindings)
        return self._host

    def _remove_fired_once(self, name: str, fired: tuple[Binding, ...]) -> None:
        live = self._handlers.get(name)
        if not live:
            return
        fired_ids = {id(binding) for binding in fired}
        kept = []
        for binding in live:
            if binding.once and id(binding) in fired_ids:
                binding.removed = True
                logger.debug(f"Removed fire-once handler {binding.handler!r} from event '{name}'")
            else:
                kept.append(binding)
        if kept:
            live[:] = kept
        else:
            del self._handlers[name]

    def has_handlers(self, name: str) -> bool:
        """Check whether any handler is registered for an event."""
        return bool(self._handlers.get(name))

    def handler_count(self, name: str) -> int:
        """Count the handlers registered for an event."""
        return len(self._handlers.get(name, ()))

    def event_names(self) -> list[str]:
        """List event names that have handlers, in the order they were first bound."""
        return list(self._handlers)

    on = bind
    off = un = unbind
    trigger = emit = dispatch


def attach(host: object, overwrite: bool = False) -> EventEmitter:
    """Give a host object its own emitter and expose its methods on the host.

    After ``attach(obj)``, ``obj.on(...)``, ``obj.emit(...)`` and the other
    aliases work directly and return ``obj``.

    Args:
        host: Object to extend. Must accept new attributes.
        overwrite: Replace attributes the host already has with the same names.

    Returns:
        The emitter now backing the host.

    Raises:
        AttributeError: If the host already defines one of the method names
            and overwrite is False.
    """
    if not overwrite:
        taken = [method for method in EMITTER_METHODS if hasattr(host, method)]
        if taken:
            raise AttributeError(
                f"{type(host).__name__} already defines {', '.join(taken)}; pass overwrite=True to replace"
            )

    emitter = EventEmitter(host=host)
    for method in EMITTER_METHODS:
        setattr(host, method, getattr(emitter, method))
    logger.debug(f"Attached event emitter to {type(host).__name__}")
    return emitter
