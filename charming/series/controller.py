from typing import Type, TypeVar

from ..controller import Controller
from ..errors import WrongVariantError
from .line import Line, LineController
from .scatter import Scatter, ScatterController
from .types import SeriesBase

V = TypeVar("V", bound=Controller)


class SeriesController(Controller[SeriesBase]):
    """Mutation access to one series whatever its variant.

    Variant-specific edits go through ``as_line_mut`` / ``as_scatter_mut``,
    which fail with ``WrongVariantError`` when the series is another variant.
    """

    def as_line_mut(self) -> LineController:
        return self._as_variant(Line, LineController)

    def as_scatter_mut(self) -> ScatterController:
        return self._as_variant(Scatter, ScatterController)

    def _as_variant(self, variant: Type[SeriesBase], controller_cls: Type[V]) -> V:
        target = self.target
        if not isinstance(target, variant):
            raise WrongVariantError(variant.__name__, type(target).__name__)
        # The borrow belongs to this controller; the child shares it.
        return controller_cls(target, self, borrow=False)
