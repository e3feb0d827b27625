from __future__ import annotations

import shutil
import sys
from typing import TextIO

from routine_builder.application.ports.view import ViewPort
from routine_builder.application.use_cases.conversation import GENERATE_CONTROL, SEND_CONTROL
from routine_builder.application.use_cases.detail_overlay import CLOSE_CONTROL, OverlayContent
from routine_builder.application.use_cases.grid_renderer import ProductCard
from routine_builder.domain.entities.product import Product
from routine_builder.domain.entities.search_result import SearchResult

SNIPPET_LIMIT = 200


class ConsoleView(ViewPort):
    """Plain-text front end for the local harness. Search hits print as [match]."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out or sys.stdout
        self._direction = "ltr"
        self._controls: set[str] = {GENERATE_CONTROL, SEND_CONTROL}
        self._labels: dict[str, str] = {GENERATE_CONTROL: "Generate Routine", SEND_CONTROL: "Send"}
        self._disabled: set[str] = set()
        self._cards: dict[int, ProductCard] = {}
        self._highlighted: set[int] = set()
        self.focused: str | None = None
        self.scrolled_to: int | None = None

    # grid
    def render_grid(self, cards: list[ProductCard]) -> None:
        self._drop_card_controls()
        self._cards = {c.id: c for c in cards}
        self._controls.update(c.learn_more_control for c in cards)
        self._print("Products:")
        for card in cards:
            self._print_card(card)

    def render_grid_placeholder(self, text: str) -> None:
        self._drop_card_controls()
        self._cards = {}
        self._print(f"Products: {text}")

    def set_card_selected(self, product_id: int, selected: bool) -> None:
        card = self._cards.get(product_id)
        if card is None:
            return
        self._cards[product_id] = ProductCard(
            id=card.id,
            name=card.name,
            name_segments=card.name_segments,
            brand=card.brand,
            image=card.image,
            selected=selected,
        )
        self._print(f"{'Selected' if selected else 'Deselected'}: {card.name}")

    def scroll_card_into_view(self, product_id: int) -> None:
        self.scrolled_to = product_id

    def set_card_highlight(self, product_id: int, on: bool) -> None:
        if on:
            self._highlighted.add(product_id)
            card = self._cards.get(product_id)
            if card is not None:
                self._print_card(card)
        else:
            self._highlighted.discard(product_id)

    def clear_category_filter(self) -> None:
        self._print("(category filter cleared)")

    # selection tray
    def render_tray(self, chips: list[Product]) -> None:
        self._print("Selected: " + "  ".join(f"[{p.id}] {p.name} (x)" for p in chips))

    def render_tray_placeholder(self, text: str) -> None:
        self._print(f"Selected: {text}")

    # detail overlay
    def show_overlay(self, content: OverlayContent) -> None:
        self._controls.add(CLOSE_CONTROL)
        self._print("-" * 60)
        self._print(content.title)
        if content.brand:
            self._print(content.brand)
        if content.image:
            self._print(f"image: {content.image}")
        self._print(content.description)
        self._print("-" * 60 + " (/close or Escape)")

    def hide_overlay(self) -> None:
        self._controls.discard(CLOSE_CONTROL)
        if self.focused == CLOSE_CONTROL:
            self.focused = None

    # controls
    def has_control(self, control_id: str) -> bool:
        return control_id in self._controls

    def focus(self, control_id: str) -> None:
        if control_id in self._controls:
            self.focused = control_id

    def set_control_enabled(self, control_id: str, enabled: bool) -> None:
        if enabled:
            self._disabled.discard(control_id)
        else:
            self._disabled.add(control_id)

    def get_control_label(self, control_id: str) -> str:
        return self._labels.get(control_id, "")

    def set_control_label(self, control_id: str, label: str) -> None:
        self._labels[control_id] = label

    # chat window
    def append_chat_message(self, role: str, content: str) -> None:
        who = "You" if role == "user" else "Advisor"
        self._print(f"{who}: {content}")

    def append_citations(self, results: list[SearchResult]) -> None:
        self._print("Sources:")
        for r in results:
            self._print(f"  - {r.title or r.url} <{r.url}>")
            if r.snippet:
                self._print(f"    {r.snippet[:SNIPPET_LIMIT]}")

    # document
    def set_direction(self, direction: str) -> None:
        self._direction = direction

    def _print_card(self, card: ProductCard) -> None:
        name = "".join(f"[{s.text}]" if s.is_match else s.text for s in card.name_segments)
        mark = "x" if card.selected else " "
        flag = " *" if card.id in self._highlighted else ""
        self._print(f"  ({mark}) {card.id:>4}  {name} - {card.brand}{flag}")

    def _drop_card_controls(self) -> None:
        self._controls = {c for c in self._controls if not c.startswith("learnmore:")}

    def _print(self, line: str) -> None:
        if self._direction == "rtl":
            width = shutil.get_terminal_size((80, 20)).columns
            line = line.rjust(width)
        print(line, file=self._out)
