"""Scoped mutation handles.

A controller grants mutation access to one owned value for the duration of a
``with`` block or a callback. Only one controller may borrow a given value at
a time, and a controller is unusable once its scope has ended. Controllers
opened from another controller (a series reached through its chart) close
together with their parent.
"""

import logging
from contextlib import contextmanager
from typing import Any, Callable, Generic, Iterator, List, Optional, TypeVar

from pydantic import PrivateAttr

from .base import EChartsModel
from .errors import BorrowError, ControllerClosedError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound="MutableModel")
C = TypeVar("C", bound="Controller[Any]")
MM = TypeVar("MM", bound="MutableModel")


class Controller(Generic[M]):
    def __init__(self, target: M, parent: Optional["Controller[Any]"] = None, *, borrow: bool = True):
        if borrow:
            target._acquire()
        self._target = target
        self._owns_borrow = borrow
        self._open = True
        self._children: List["Controller[Any]"] = []
        if parent is not None:
            parent._children.append(self)

    @property
    def is_open(self) -> bool:
        return self._open

    @property
    def target(self) -> M:
        if not self._open:
            raise ControllerClosedError(f"{type(self).__name__} used after its scope ended")
        return self._target

    def _set(self: C, field_name: str, value: Any) -> C:
        setattr(self.target, field_name, value)
        return self

    def _extend(self: C, field_name: str, items: Any) -> C:
        current = list(getattr(self.target, field_name))
        current.extend(items if isinstance(items, (list, tuple)) else [items])
        return self._set(field_name, current)

    def _close_children(self) -> None:
        for child in self._children:
            child.close()
        self._children = []

    def close(self) -> None:
        if not self._open:
            return
        self._close_children()
        self._open = False
        if self._owns_borrow:
            self._target._release()


class MutableModel(EChartsModel):
    _borrowed: bool = PrivateAttr(default=False)

    def _acquire(self) -> None:
        if self._borrowed:
            raise BorrowError(f"{type(self).__name__} is already borrowed by another controller")
        self._borrowed = True
        logger.debug("Borrowed %s for mutation", type(self).__name__)

    def _release(self) -> None:
        self._borrowed = False
        logger.debug("Released %s", type(self).__name__)

    def _detached_copy(self: MM) -> MM:
        copy = self.model_copy(deep=True)
        copy._borrowed = False
        return copy

    def _open_controller(self) -> Controller[Any]:
        raise NotImplementedError

    @contextmanager
    def mutable(self) -> Iterator[Any]:
        controller = self._open_controller()
        try:
            yield controller
        finally:
            controller.close()

    def with_mutable(self, fn: Callable[[Any], Any]) -> Any:
        """Run ``fn`` with a controller for this value, then end the borrow."""
        with self.mutable() as controller:
            fn(controller)
        return self
