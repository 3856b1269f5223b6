from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .dependencies import get_llm_config, get_store
from .llm.config import DEFAULT_LLM_CONFIG, LLMConfig
from .recipes.config import DEFAULT_STORE_CONFIG, StoreConfig
from .recipes.errors import RecipeNotFoundError, RecipeValidationError
from .recipes.models import (
    DeletedRecipe,
    DeleteResponse,
    ErrorResponse,
    RecipeForm,
    RecipeListResponse,
    RecipeResponse,
    RecipeStatus,
    RecipeUpdate,
    SearchFilters,
)
from .recipes.store import RecipeStore
from .suggestions.engine import generate_suggestions
from .suggestions.models import (
    SuggestionHealthResponse,
    SuggestionRequest,
    SuggestionResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


# ── Public endpoints ─────────────────────────────────────────────────────


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


# ── Recipe endpoints ─────────────────────────────────────────────────────


@router.get("/api/recipes", response_model=RecipeListResponse)
def list_recipes(
    query: str = "",
    cuisine_type: str | None = Query(default=None, alias="cuisineType"),
    status: RecipeStatus | None = None,
    max_prep_time: int | None = Query(default=None, alias="maxPrepTime", gt=0),
    store: RecipeStore = Depends(get_store),
) -> RecipeListResponse:
    filters = SearchFilters(
        query=query,
        cuisine_type=cuisine_type or None,
        status=status,
        max_prep_time=max_prep_time,
    )
    return RecipeListResponse(data=store.search(filters))


@router.get("/api/recipes/{recipe_id}", response_model=RecipeResponse)
def get_recipe(recipe_id: str, store: RecipeStore = Depends(get_store)) -> RecipeResponse:
    return RecipeResponse(data=store.get_recipe(recipe_id))


@router.post("/api/recipes", response_model=RecipeResponse, status_code=201)
def create_recipe(body: RecipeForm, store: RecipeStore = Depends(get_store)) -> RecipeResponse:
    return RecipeResponse(data=store.create_recipe(body))


@router.put("/api/recipes/{recipe_id}", response_model=RecipeResponse)
def update_recipe(
    recipe_id: str,
    body: RecipeUpdate,
    store: RecipeStore = Depends(get_store),
) -> RecipeResponse:
    if body.is_status_only:
        return RecipeResponse(data=store.update_status(recipe_id, body.status))
    return RecipeResponse(data=store.update_recipe(recipe_id, body))


@router.delete("/api/recipes/{recipe_id}", response_model=DeleteResponse)
def delete_recipe(recipe_id: str, store: RecipeStore = Depends(get_store)) -> DeleteResponse:
    store.delete_recipe(recipe_id)
    return DeleteResponse(data=DeletedRecipe(id=recipe_id))


# ── Suggestion endpoints ─────────────────────────────────────────────────


@router.post("/api/ai/recipe-suggestions", response_model=SuggestionResponse)
def recipe_suggestions(
    body: SuggestionRequest,
    config: LLMConfig = Depends(get_llm_config),
) -> SuggestionResponse:
    return generate_suggestions(body.ingredients, body.preferences, config=config)


@router.get("/api/ai/recipe-suggestions", response_model=SuggestionHealthResponse)
def recipe_suggestions_health(
    config: LLMConfig = Depends(get_llm_config),
) -> SuggestionHealthResponse:
    return SuggestionHealthResponse(
        message="AI Recipe Suggestions API is running",
        has_llm=config.is_configured,
        timestamp=datetime.now(timezone.utc),
    )


# ── Error handling ───────────────────────────────────────────────────────


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RecipeValidationError)
    async def validation_error(request: Request, exc: RecipeValidationError) -> JSONResponse:
        return _error(400, str(exc))

    @app.exception_handler(RecipeNotFoundError)
    async def not_found(request: Request, exc: RecipeNotFoundError) -> JSONResponse:
        return _error(404, "Recipe not found")

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        if not errors:
            return _error(422, "Invalid request")
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path"))
        message = first.get("msg", "Invalid value")
        return _error(422, f"{field}: {message}" if field else message)

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error(500, "Failed to process request")


def create_app(
    store: RecipeStore | None = None,
    llm_config: LLMConfig = DEFAULT_LLM_CONFIG,
    store_config: StoreConfig = DEFAULT_STORE_CONFIG,
) -> FastAPI:
    """
    Create the API application.

    Parameters
    ----------
    store:
        Recipe store to serve. When ``None`` a new one is created, seeded
        with the sample recipes unless ``store_config.seed_samples`` is off.
    llm_config:
        Groq settings for the suggestion endpoint. Without an API key the
        endpoint answers from the rule-based templates only.
    """
    app = FastAPI(title="Recipe Keeper API", version="1.0.0")

    if store is None:
        store = RecipeStore.with_samples() if store_config.seed_samples else RecipeStore()
    app.state.recipe_store = store
    app.state.llm_config = llm_config

    _register_error_handlers(app)
    app.include_router(router)
    return app


app = create_app()
