"""Internal constants shared across the library."""

BASE_URL = "http://localhost:8080/rest"
USER_AGENT = "pyroster"
DEFAULT_REQUEST_TIMEOUT: float = 30.0
