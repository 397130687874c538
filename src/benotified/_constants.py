"""Internal constants shared across the library."""

BEREAL_BASE_URL = "https://bereal.devin.rest"
LATEST_MOMENTS_ENDPOINT = "/v1/moments/latest"
DEFAULT_REGION = "asia-east"

LINE_BASE_URL = "https://api.line.me"
LINE_BROADCAST_ENDPOINT = "/v2/bot/message/broadcast"

USER_AGENT = "benotified/0.1"

DEFAULT_POLL_INTERVAL: float = 5.0
DEFAULT_REQUEST_TIMEOUT: float = 10.0

MOMENT_MESSAGE_TEMPLATE = "Time to BeReal! ({date})"
GREETING_MESSAGE = "Hello everyone!"

# Raw body text kept in exception messages; the full body stays on the exception.
ERROR_BODY_EXCERPT = 200
