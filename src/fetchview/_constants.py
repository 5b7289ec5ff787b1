"""Internal constants shared across the library."""

BASE_URL = "http://localhost:3000"
ENDPOINT = "/api/data"
USER_AGENT = "fetchview/1.0"
DEFAULT_TIMEOUT: float = 10.0

# ------------------------------------------------------------------
# Rendered text contract
# ------------------------------------------------------------------

TITLE_TEXT = "Hello World"
BUTTON_LABEL = "Fetch Data"
LOADING_TEXT = "Loading..."
FETCH_FAILED_MESSAGE = "Failed to fetch data"
