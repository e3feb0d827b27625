from __future__ import annotations

import logging

from routine_builder.application.app_state import AppState
from routine_builder.application.ports.chat_gateway import ChatGatewayPort
from routine_builder.application.ports.search import SearchPort
from routine_builder.application.ports.view import ViewPort
from routine_builder.application.utils.prompt_format import search_context_message
from routine_builder.application.utils.routine_prompts import (
    SYSTEM_INSTRUCTION,
    build_routine_request,
    follow_up_search_query,
    routine_search_query,
)
from routine_builder.domain.entities.chat_message import ChatMessage
from routine_builder.domain.entities.search_result import SearchResult

GENERATE_CONTROL = "generateRoutine"
SEND_CONTROL = "sendBtn"
GENERATING_LABEL = "Generating…"
CITATION_LIMIT = 5

NO_SELECTION_NOTICE = "Please select one or more products first."
NOT_GENERATED_NOTICE = "Please generate a routine first, then ask follow-up questions about it."
GENERATING_NOTICE = "Generating routine… Please wait."


class ConversationPipeline:
    """
    Turns the selection into a routine request and runs follow-up chat.

    Both entry points:
    - disable their triggering control for the whole network exchange
    - render every failure inline instead of raising
    - return True only when an assistant reply was appended
    """

    def __init__(
        self,
        state: AppState,
        view: ViewPort,
        chat: ChatGatewayPort,
        search: SearchPort | None = None,
        brand_hint: str = "",
    ) -> None:
        self._state = state
        self._view = view
        self._chat = chat
        self._search = search
        self._brand_hint = brand_hint
        self._logger = logging.getLogger(__name__)

    def generate(self) -> bool:
        selected = list(self._state.selected)
        if not selected:
            self._view.append_chat_message("assistant", NO_SELECTION_NOTICE)
            return False

        transcript = self._state.transcript
        transcript.reset(SYSTEM_INSTRUCTION, build_routine_request(selected))

        previous_label = self._view.get_control_label(GENERATE_CONTROL)
        self._view.set_control_enabled(GENERATE_CONTROL, False)
        self._view.set_control_label(GENERATE_CONTROL, GENERATING_LABEL)
        self._view.append_chat_message("assistant", GENERATING_NOTICE)

        try:
            results = self._lookup(routine_search_query(selected, self._brand_hint))
            context = search_context_message(results)
            if context is not None:
                transcript.append(context)

            reply = self._chat.complete(list(transcript.messages))

            transcript.append(ChatMessage(role="assistant", content=reply))
            self._state.routine_generated = True
            self._render_reply(reply, results)
            self._logger.info("Routine generated", extra={"count": len(selected)})
            return True
        except Exception as e:
            self._logger.warning("Routine generation failed", extra={"reason": str(e)})
            self._view.append_chat_message("assistant", f"Error generating routine: {e}")
            return False
        finally:
            self._view.set_control_enabled(GENERATE_CONTROL, True)
            self._view.set_control_label(GENERATE_CONTROL, previous_label)

    def follow_up(self, text: str) -> bool:
        question = (text or "").strip()
        if not question:
            return False
        if not self._state.routine_generated:
            self._view.append_chat_message("assistant", NOT_GENERATED_NOTICE)
            return False

        transcript = self._state.transcript
        self._view.append_chat_message("user", question)
        transcript.append(ChatMessage(role="user", content=question))

        self._view.set_control_enabled(SEND_CONTROL, False)
        try:
            results = self._lookup(follow_up_search_query(question, self._brand_hint))
            outgoing = list(transcript.messages)
            context = search_context_message(results)
            if context is not None:
                # sent with this request only; the transcript keeps user/assistant pairs
                outgoing.append(context)

            reply = self._chat.complete(outgoing)

            transcript.append(ChatMessage(role="assistant", content=reply))
            self._render_reply(reply, results)
            return True
        except Exception as e:
            self._logger.warning("Follow-up failed", extra={"reason": str(e)})
            self._view.append_chat_message("assistant", f"Error: {e}")
            return False
        finally:
            self._view.set_control_enabled(SEND_CONTROL, True)

    def _lookup(self, query: str) -> list[SearchResult]:
        if self._search is None:
            return []
        try:
            return self._search.search(query)
        except Exception as e:
            self._logger.warning("Web search skipped", extra={"query": query, "reason": str(e)})
            return []

    def _render_reply(self, reply: str, results: list[SearchResult]) -> None:
        self._view.append_chat_message("assistant", reply)
        if results:
            self._view.append_citations(results[:CITATION_LIMIT])
