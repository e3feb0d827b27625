from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from routine_builder.domain.entities.product import Product
from routine_builder.domain.entities.search_result import SearchResult

if TYPE_CHECKING:
    from routine_builder.application.use_cases.detail_overlay import OverlayContent
    from routine_builder.application.use_cases.grid_renderer import ProductCard


class ViewPort(ABC):
    """Everything the picker needs from a front end.

    Controls are addressed by string ids (``"generateRoutine"``, ``"sendBtn"``,
    ``"learnmore:<product id>"``, ``"modalClose"``).
    """

    # grid
    @abstractmethod
    def render_grid(self, cards: list["ProductCard"]) -> None:
        raise NotImplementedError

    @abstractmethod
    def render_grid_placeholder(self, text: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def set_card_selected(self, product_id: int, selected: bool) -> None:
        raise NotImplementedError

    @abstractmethod
    def scroll_card_into_view(self, product_id: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def set_card_highlight(self, product_id: int, on: bool) -> None:
        raise NotImplementedError

    @abstractmethod
    def clear_category_filter(self) -> None:
        raise NotImplementedError

    # selection tray
    @abstractmethod
    def render_tray(self, chips: list[Product]) -> None:
        raise NotImplementedError

    @abstractmethod
    def render_tray_placeholder(self, text: str) -> None:
        raise NotImplementedError

    # detail overlay
    @abstractmethod
    def show_overlay(self, content: "OverlayContent") -> None:
        raise NotImplementedError

    @abstractmethod
    def hide_overlay(self) -> None:
        raise NotImplementedError

    # controls
    @abstractmethod
    def has_control(self, control_id: str) -> bool:
        """False once a re-render has removed the control."""
        raise NotImplementedError

    @abstractmethod
    def focus(self, control_id: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def set_control_enabled(self, control_id: str, enabled: bool) -> None:
        raise NotImplementedError

    @abstractmethod
    def get_control_label(self, control_id: str) -> str:
        raise NotImplementedError

    @abstractmethod
    def set_control_label(self, control_id: str, label: str) -> None:
        raise NotImplementedError

    # chat window
    @abstractmethod
    def append_chat_message(self, role: str, content: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def append_citations(self, results: list[SearchResult]) -> None:
        raise NotImplementedError

    # document
    @abstractmethod
    def set_direction(self, direction: str) -> None:
        """Either "ltr" or "rtl"."""
        raise NotImplementedError
