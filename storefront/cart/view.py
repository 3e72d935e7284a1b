"""Layout view preference (card grid or list) for product listings."""
from enum import Enum
from typing import Union

from storefront.state import Atom


class LayoutView(str, Enum):
    CARD = "card"
    LIST = "list"


layout_view: Atom[LayoutView] = Atom(LayoutView.CARD)


def set_layout_view(view: Union[LayoutView, str]) -> None:
    """Set the layout view; unknown values raise ValueError."""
    layout_view.set(LayoutView(view))


def get_layout_view() -> LayoutView:
    return layout_view.get()
