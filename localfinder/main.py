import pathlib
from typing import Annotated, List

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from jinja2 import Template

from localfinder.config import settings
from localfinder.errors import (
    GENERIC_SEARCH_ERROR_MESSAGE,
    MissingCredentialsError,
    TemporaryConnectivityError,
)
from localfinder.log_config import get_logger, log_request_middleware, setup_logging
from localfinder.schemas import (
    PlaceCard,
    SearchRequest,
    SearchResponse,
    SearchResult,
    SearchState,
)
from localfinder.services.gemini_client import GeminiClient
from localfinder.services.search import search_places
from localfinder.services.search_session import SessionRegistry
from localfinder.utils.answer_format import render_answer
from localfinder.utils.place_category import match_rule

logger = get_logger(__name__)

app = FastAPI(title="LocalFinder", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(log_request_middleware)

WEB_DIR = pathlib.Path(__file__).parent / "web"
app.mount("/static", StaticFiles(directory=WEB_DIR / "static"), name="static")

CATEGORIES = [
    {"id": "mercado", "label": "🛒 Mercado"},
    {"id": "farmacia", "label": "💊 Farmácia"},
    {"id": "beleza", "label": "✂️ Beleza"},
]
DISTANCES = [
    {"id": "1km", "label": "Até 1km"},
    {"id": "5km", "label": "Até 5km"},
    {"id": "10km", "label": "Até 10km"},
    {"id": "any", "label": "Sem limite"},
]

sessions = SessionRegistry(max_sessions=settings.max_sessions)

_gemini_client: GeminiClient | None = None


def get_gemini_client() -> GeminiClient:
    global _gemini_client
    if _gemini_client is None:
        try:
            _gemini_client = GeminiClient()
        except MissingCredentialsError as exc:
            logger.error("Gemini client unavailable", error=exc.message)
            raise HTTPException(status_code=500, detail=exc.message)
    return _gemini_client


GeminiDep = Annotated[GeminiClient, Depends(get_gemini_client)]


def to_cards(result: SearchResult) -> List[PlaceCard]:
    cards = []
    for place in result.places:
        rule = match_rule(place.title)
        cards.append(
            PlaceCard(**place.model_dump(), category=rule.category, label=rule.label)
        )
    return cards


@app.on_event("startup")
async def startup_event():
    setup_logging()
    logger.info("LocalFinder started", model=settings.gemini_model)


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}


@app.post("/v1/search", response_model=SearchResponse)
async def search(body: SearchRequest, client: GeminiDep):
    query = body.query.strip()
    if not query:
        raise HTTPException(status_code=400, detail="Digite um endereço para buscar.")

    session = sessions.get(body.session_id) if body.session_id else None
    token = session.begin() if session else None

    try:
        result = await search_places(query, body.filters, body.location, client=client)
    except TemporaryConnectivityError as exc:
        if session:
            session.commit_error(token, exc.message)
        raise HTTPException(status_code=503, detail=exc.message)
    except Exception as exc:
        message = str(exc) or GENERIC_SEARCH_ERROR_MESSAGE
        logger.error("Search failed", query=query, error=message)
        if session:
            session.commit_error(token, message)
        raise HTTPException(status_code=502, detail=message)

    superseded = False
    if session:
        superseded = not session.commit_result(token, result)
        if superseded:
            logger.info("Stale search result ignored", session_id=body.session_id, token=token)

    return SearchResponse(
        text=result.text,
        answer_html=render_answer(result.text),
        places=to_cards(result),
        request_token=token,
        superseded=superseded,
    )


@app.get("/v1/search/state", response_model=SearchState)
async def search_state(session_id: str):
    session = sessions.find(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Sessão não encontrada.")
    return session.snapshot()


WEB_INDEX = WEB_DIR / "index.html"
if WEB_INDEX.exists():
    INDEX_HTML = WEB_INDEX.read_text(encoding="utf-8")
else:
    INDEX_HTML = """<!doctype html><html><body>
    <h3>index.html não encontrado.</h3>
    <p>Crie o arquivo localfinder/web/index.html.</p>
    </body></html>"""


@app.get("/", response_class=HTMLResponse)
async def index(_: Request):
    html = Template(INDEX_HTML, autoescape=True).render(
        APP_NAME=settings.app_name,
        CATEGORIES=CATEGORIES,
        DISTANCES=DISTANCES,
    )
    return HTMLResponse(content=html)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8000)
