# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from collections.abc import Callable
from typing import Any


class Repeater:
    """
    Execute a given function for each item of a collection, dispatching
    registered exception types to handlers and tracking per-item outcomes.

    Launchers use this to process input files independently: an error
    registered with a handler only affects the item that raised it.

    Attributes:
        items (list[Any]): List of items to process.
        encountered_errors (dict[int, BaseException]): Item index -> exception
            raised while processing it.
        results (dict[int, Any]): Item index -> value returned for it.
        current_iteration (int): The index of the item currently being processed.

    Args:
        items (list[Any]): A list of items to iterate over.
        func (Callable): Function to execute for each item. The item will be passed
            as the first argument, followed by any `*args` and `**kwargs`.
        *args (Any): Positional arguments forwarded to `func`.
        **kwargs (Any): Keyword arguments forwarded to `func`.
    """

    def __init__(
        self,
        items: list[Any],
        func: Callable,
        *args: Any,
        **kwargs: Any,
    ):
        self.encountered_errors: dict[int, BaseException] = {}
        self.results: dict[int, Any] = {}
        self.items = items
        self.current_iteration = 0

        self._handlers: dict[type[BaseException], Callable[[BaseException], Any]] = {}
        self._func = func
        self._args = args
        self._kwargs = kwargs

    def onException(self, exc_type: type[BaseException], handler: Callable) -> None:
        """
        Register a handler function for a specific exception type.

        Subclasses of `exc_type` are dispatched to `handler` as well,
        unless a handler is registered for the more specific type.

        Args:
            exc_type (type[BaseException]): The exception type to handle.
            handler (Callable): Function to call when `exc_type` is raised.
                The handler must accept two arguments:
                - BaseException: The caught exception instance.
                - Repeater: Reference to this `Repeater` instance.
        """
        self._handlers[exc_type] = handler

    def run(self) -> None:
        """
        Execute the target function for all items, invoking handlers for exceptions.

        Unhandled exceptions propagate normally and interrupt the iteration.
        """
        for i, item in enumerate(self.items):
            self.current_iteration = i
            try:
                self.results[i] = self._func(item, *self._args, **self._kwargs)
            except tuple(self._handlers.keys()) as e:
                self.encountered_errors[i] = e
                self._findHandler(e)(e, self)

    def allFailed(self) -> bool:
        """Return True if every processed item raised a handled exception."""
        return len(self.encountered_errors) == len(self.items)

    def _findHandler(self, exception: BaseException) -> Callable:
        """
        Return the handler registered for the closest base class of the exception.
        """
        for cls in type(exception).__mro__:
            if cls in self._handlers:
                return self._handlers[cls]

        # unreachable: the exception was caught using the registered types
        raise exception
