from fastapi import FastAPI

from routine_builder.api.chat import router as chat_router
from routine_builder.api.cors import permissive_cors
from routine_builder.api.search import router as search_router
from routine_builder.core.config import settings
from routine_builder.core.log_format import configure_logging

configure_logging(settings.LOG_LEVEL)

app = FastAPI(title="Routine Builder Proxy", version="1.0.0")
app.middleware("http")(permissive_cors)

app.include_router(chat_router, tags=["chat"])
app.include_router(search_router, tags=["search"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
