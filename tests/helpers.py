from types import SimpleNamespace

from localfinder.services.gemini_client import GeminiClient


class FakeModels:
    """Stands in for client.aio.models; records every call."""

    def __init__(self, response=None, error=None, side_effect=None):
        self.response = response
        self.error = error
        self.side_effect = side_effect
        self.calls = []

    async def generate_content(self, *, model, contents, config):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.side_effect is not None:
            self.side_effect()
        if self.error is not None:
            raise self.error
        return self.response


def make_client(response=None, error=None, side_effect=None):
    models = FakeModels(response=response, error=error, side_effect=side_effect)
    sdk = SimpleNamespace(aio=SimpleNamespace(models=models))
    return GeminiClient(model="gemini-test", client=sdk), models


def maps_chunk(title=None, uri=None, place_id=None):
    maps = {}
    if title is not None:
        maps["title"] = title
    if uri is not None:
        maps["uri"] = uri
    if place_id is not None:
        maps["placeId"] = place_id
    return {"maps": maps}


def raw_response(text, chunks):
    return {"text": text, "candidates": [{"groundingMetadata": {"groundingChunks": chunks}}]}
