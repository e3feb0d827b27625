from __future__ import annotations

import logging
from functools import lru_cache

import httpx
from openai import OpenAI

from routine_builder.application.app_state import AppState
from routine_builder.application.ports.llm import LLMPort
from routine_builder.application.ports.scheduler import SchedulerPort
from routine_builder.application.ports.search import SearchPort
from routine_builder.application.ports.selection_store import SelectionStorePort
from routine_builder.application.ports.view import ViewPort
from routine_builder.application.use_cases.catalog_store import CatalogStore
from routine_builder.application.use_cases.conversation import ConversationPipeline
from routine_builder.application.use_cases.detail_overlay import DetailOverlay
from routine_builder.application.use_cases.grid_renderer import GridRenderer
from routine_builder.application.use_cases.picker_commands import PickerCommands
from routine_builder.application.use_cases.proxy_chat import ProxyChatUseCase
from routine_builder.application.use_cases.proxy_search import ProxySearchUseCase
from routine_builder.application.use_cases.selection_tray import SelectionTray
from routine_builder.core.config import Settings, load_settings
from routine_builder.infrastructure.catalog.json_catalog import JsonCatalogSource
from routine_builder.infrastructure.llm.mock_llm import MockLLM
from routine_builder.infrastructure.llm.openai_llm import OpenAILLM
from routine_builder.infrastructure.proxy.chat_proxy_client import ChatProxyClient
from routine_builder.infrastructure.search.google_search import GoogleSearch
from routine_builder.infrastructure.search.llm_search import LlmSearch
from routine_builder.infrastructure.search.search_proxy_client import SearchProxyClient
from routine_builder.infrastructure.search.serpapi_search import SerpApiSearch
from routine_builder.infrastructure.store.json_selection_store import JsonSelectionStore
from routine_builder.infrastructure.store.memory_selection_store import MemorySelectionStore

logger = logging.getLogger(__name__)


def get_request_settings() -> Settings:
    return load_settings()


@lru_cache
def shared_http_client(timeout: float | None = None) -> httpx.Client:
    """One pooled client per timeout, reused across requests."""
    return httpx.Client(timeout=timeout)


@lru_cache
def shared_openai_client(api_key: str, timeout: float | None = None) -> OpenAI:
    return OpenAI(api_key=api_key, timeout=timeout)


def _http_client(settings: Settings) -> httpx.Client:
    return shared_http_client(settings.HTTP_TIMEOUT_SECONDS)


def get_llm(settings: Settings) -> LLMPort | None:
    if settings.OPENAI_API_KEY and settings.OPENAI_API_KEY.strip():
        client = shared_openai_client(settings.OPENAI_API_KEY.strip(), settings.HTTP_TIMEOUT_SECONDS)
        return OpenAILLM(settings=settings, client=client)
    if settings.ENV.lower() in {"dev", "local"}:
        logger.info("Using MockLLM (OPENAI_API_KEY missing, ENV=dev/local)")
        return MockLLM()
    return None


def get_search_backend(settings: Settings, llm: LLMPort | None = None) -> SearchPort | None:
    backend = settings.SEARCH_BACKEND.strip().lower()
    if backend == "none":
        return None
    if backend in {"auto", "serpapi"} and settings.SERPAPI_KEY:
        return SerpApiSearch(api_key=settings.SERPAPI_KEY, client=_http_client(settings))
    if backend in {"auto", "google"} and settings.GOOGLE_API_KEY and settings.GOOGLE_CX:
        return GoogleSearch(api_key=settings.GOOGLE_API_KEY, cx=settings.GOOGLE_CX, client=_http_client(settings))
    if backend == "llm" and llm is not None:
        logger.warning("Using LLM pseudo-search; results are model-generated, not fetched")
        return LlmSearch(llm)
    return None


def build_proxy_chat_use_case(settings: Settings) -> ProxyChatUseCase:
    llm = get_llm(settings)
    return ProxyChatUseCase(llm=llm, search=get_search_backend(settings, llm))


def build_proxy_search_use_case(settings: Settings) -> ProxySearchUseCase:
    llm = get_llm(settings) if settings.SEARCH_BACKEND.strip().lower() == "llm" else None
    return ProxySearchUseCase(backend=get_search_backend(settings, llm))


def get_selection_store(settings: Settings) -> SelectionStorePort:
    if not settings.SELECTION_STORE_PATH:
        return MemorySelectionStore()
    return JsonSelectionStore(path=settings.SELECTION_STORE_PATH)


def build_picker(
    view: ViewPort,
    scheduler: SchedulerPort,
    settings: Settings | None = None,
    state: AppState | None = None,
) -> PickerCommands:
    settings = settings or load_settings()
    state = state or AppState()

    store = CatalogStore(state, JsonCatalogSource(settings.CATALOG_PATH, client=_http_client(settings)))
    overlay = DetailOverlay(state, view, scheduler)
    grid = GridRenderer(state, store, view, overlay)
    tray = SelectionTray(state, store, grid, view, get_selection_store(settings), scheduler)
    conversation = ConversationPipeline(
        state,
        view,
        chat=ChatProxyClient(client=_http_client(settings)),
        search=SearchProxyClient(client=_http_client(settings)),
        brand_hint=settings.SEARCH_BRAND_HINT,
    )
    return PickerCommands(state, view, store, grid, overlay, tray, conversation)
