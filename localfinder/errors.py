TEMPORARY_CONNECTIVITY_MESSAGE = (
    "Ocorreu um erro temporário de conexão com o Google Maps. "
    "Por favor, tente novamente."
)
GENERIC_SEARCH_ERROR_MESSAGE = "Ocorreu um erro ao buscar os locais. Tente novamente."


class SearchError(Exception):
    """Base error whose message is safe to show to the user."""

    default_message = GENERIC_SEARCH_ERROR_MESSAGE

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class TemporaryConnectivityError(SearchError):
    default_message = TEMPORARY_CONNECTIVITY_MESSAGE


class MissingCredentialsError(SearchError):
    default_message = (
        "GEMINI_API_KEY não está configurada. "
        "Verifique o arquivo .env ou as variáveis de ambiente."
    )
