from typing import Any, Dict, Optional

from google import genai
from google.genai import errors as genai_errors

from ..config import settings
from ..errors import MissingCredentialsError, TemporaryConnectivityError
from ..log_config import get_logger

logger = get_logger(__name__)

TRANSIENT_MARKERS = ("Rpc failed", "500")


def is_transient_error(exc: BaseException) -> bool:
    if isinstance(exc, genai_errors.ServerError):
        return True
    message = str(exc) or ""
    return any(marker in message for marker in TRANSIENT_MARKERS)


class GeminiClient:
    """One generate_content call per search, no retries."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        client: Any = None,
    ):
        self.model = model or settings.gemini_model
        if client is not None:
            self._client = client
            return
        api_key = api_key or settings.gemini_api_key
        if not api_key:
            raise MissingCredentialsError()
        self._client = genai.Client(api_key=api_key)

    async def generate(self, prompt: str, tool_config: Dict[str, Any]):
        try:
            return await self._client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=tool_config,
            )
        except Exception as exc:
            logger.error("Gemini API Error", model=self.model, error=str(exc), exc_info=True)
            if is_transient_error(exc):
                raise TemporaryConnectivityError() from exc
            raise
