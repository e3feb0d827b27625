from __future__ import annotations

from typing import Callable

from routine_builder.application.use_cases.picker_commands import PickerCommands

HELP_TEXT = """Commands:
  /category <name>   filter by category (/category alone shows all)
  /search <term>     filter by name (/search alone clears)
  /lang <code>       switch the display language (sets text direction)
  /toggle <id>       select or deselect a product
  /key <id> <key>    press a key on a card (Enter or Space toggles)
  /info <id>         open product details
  /close             close product details (same as /esc)
  /esc               press Escape
  /remove <id>       remove a chip from the selection
  /chip <id>         jump to a selected product in the grid
  /clear             clear the selection
  /generate          ask for a routine built from the selection
  /quit              exit
Anything else is sent as a follow-up question."""


def dispatch(commands: PickerCommands, line: str, echo: Callable[[str], None] = print) -> bool:
    """Run one console line against the picker. Returns False when the session should end."""
    text = line.strip()
    if not text:
        return True
    if not text.startswith("/"):
        commands.follow_up(text)
        return True

    name, _, arg = text[1:].partition(" ")
    name = name.lower()
    arg = arg.strip()

    if name in ("quit", "exit"):
        commands.shutdown()
        return False
    if name == "help":
        echo(HELP_TEXT)
        return True
    if name == "category":
        commands.set_category(arg)
        return True
    if name == "search":
        commands.set_search(arg)
        return True
    if name == "lang":
        commands.set_language(arg)
        return True
    if name == "close":
        commands.close_overlay()
        return True
    if name == "esc":
        commands.key("Escape")
        return True
    if name == "clear":
        commands.clear_selection()
        return True
    if name == "generate":
        commands.generate()
        return True

    id_handlers: dict[str, Callable[[int], None]] = {
        "toggle": commands.activate_card,
        "info": commands.learn_more,
        "remove": commands.remove_chip,
        "chip": commands.activate_chip,
    }
    if name == "key":
        raw_id, _, key = arg.partition(" ")
        product_id = _parse_id(raw_id, echo)
        if product_id is not None:
            commands.card_key(product_id, " " if key.lower() == "space" else key)
        return True
    if name in id_handlers:
        product_id = _parse_id(arg, echo)
        if product_id is not None:
            id_handlers[name](product_id)
        return True

    echo(f"Unknown command: /{name} (try /help)")
    return True


def _parse_id(raw: str, echo: Callable[[str], None]) -> int | None:
    try:
        return int(raw)
    except ValueError:
        echo(f"Expected a product id, got {raw!r}")
        return None
