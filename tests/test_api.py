from localfinder import main
from localfinder.errors import (
    GENERIC_SEARCH_ERROR_MESSAGE,
    TEMPORARY_CONNECTIVITY_MESSAGE,
    MissingCredentialsError,
)
from localfinder.main import sessions
from tests.helpers import make_client, maps_chunk, raw_response


def test_healthz(api):
    assert api.get("/healthz").json() == {"status": "ok"}


def test_index_renders_filters(api):
    resp = api.get("/")
    assert resp.status_code == 200
    assert 'data-category="farmacia"' in resp.text
    assert '<option value="any" selected>' in resp.text


def test_search_returns_cards_and_html(api, session_id):
    raw = raw_response(
        "**Mercados**\n* **Carrefour** a 1km",
        [
            maps_chunk(uri="https://maps.google.com/?cid=0"),
            maps_chunk(title="Carrefour Bairro", uri="https://maps.google.com/?cid=1", place_id="c1"),
        ],
    )
    client, models = make_client(response=raw)
    api.use(client)

    resp = api.post(
        "/v1/search",
        json={
            "query": "  Av. Paulista, 1000 ",
            "filters": {"categories": ["mercado"], "radius": "5km"},
            "session_id": session_id,
        },
    )

    assert resp.status_code == 200
    data = resp.json()
    assert data["text"] == "**Mercados**\n* **Carrefour** a 1km"
    assert "<li><strong>Carrefour</strong> a 1km</li>" in data["answer_html"]
    assert data["places"] == [
        {
            "title": "Carrefour Bairro",
            "uri": "https://maps.google.com/?cid=1",
            "place_id": "c1",
            "category": "mercado",
            "label": "Mercado",
        }
    ]
    assert data["request_token"] == 1
    assert data["superseded"] is False
    assert '"Av. Paulista, 1000"' in models.calls[0]["contents"]

    state = api.get("/v1/search/state", params={"session_id": session_id}).json()
    assert state["loading"] is False
    assert state["result"]["places"][0]["title"] == "Carrefour Bairro"


def test_search_without_session_is_stateless(api):
    client, _ = make_client(response={"text": "", "candidates": []})
    api.use(client)

    data = api.post("/v1/search", json={"query": "Rua Augusta"}).json()

    assert data["places"] == []
    assert data["request_token"] is None


def test_blank_query_is_not_dispatched(api):
    client, models = make_client(response={"text": "ok"})
    api.use(client)

    resp = api.post("/v1/search", json={"query": "   "})

    assert resp.status_code == 400
    assert models.calls == []


def test_unknown_radius_is_rejected(api):
    client, _ = make_client(response={"text": "ok"})
    api.use(client)

    resp = api.post("/v1/search", json={"query": "x", "filters": {"radius": "50km"}})
    assert resp.status_code == 422


def test_temporary_error_message(api, session_id):
    client, _ = make_client(error=RuntimeError("Internal error encountered. 500"))
    api.use(client)

    resp = api.post("/v1/search", json={"query": "Rua X", "session_id": session_id})

    assert resp.status_code == 503
    assert resp.json()["detail"] == TEMPORARY_CONNECTIVITY_MESSAGE
    state = api.get("/v1/search/state", params={"session_id": session_id}).json()
    assert state["error"] == TEMPORARY_CONNECTIVITY_MESSAGE
    assert state["result"] is None


def test_other_errors_surface_underlying_message(api):
    client, _ = make_client(error=ValueError("API key not valid"))
    api.use(client)

    resp = api.post("/v1/search", json={"query": "Rua X"})

    assert resp.status_code == 502
    assert resp.json()["detail"] == "API key not valid"


def test_errors_without_message_use_generic_text(api):
    client, _ = make_client(error=ValueError())
    api.use(client)

    resp = api.post("/v1/search", json={"query": "Rua X"})
    assert resp.json()["detail"] == GENERIC_SEARCH_ERROR_MESSAGE


def test_superseded_search_does_not_overwrite_state(api, session_id):
    # a newer search for the same session starts while this one is in flight
    client, _ = make_client(
        response=raw_response("antigo", []),
        side_effect=lambda: sessions.get(session_id).begin(),
    )
    api.use(client)

    data = api.post("/v1/search", json={"query": "Rua X", "session_id": session_id}).json()

    assert data["superseded"] is True
    state = api.get("/v1/search/state", params={"session_id": session_id}).json()
    assert state["request_token"] == 2
    assert state["loading"] is True
    assert state["result"] is None


def test_unknown_session_state(api):
    assert api.get("/v1/search/state", params={"session_id": "nope"}).status_code == 404


def test_missing_api_key_returns_500(api, monkeypatch):
    monkeypatch.setattr(main.settings, "gemini_api_key", "")
    monkeypatch.setattr(main, "_gemini_client", None)

    resp = api.post("/v1/search", json={"query": "Rua X"})

    assert resp.status_code == 500
    assert resp.json()["detail"] == MissingCredentialsError.default_message
    assert main._gemini_client is None
