# Utility modules for the COMRADE backend and widget
from .errors import (
    ApiError, BadRequest, Unauthorized, Forbidden, NotFound, InternalError
)
from .logger import setup_logging
from .url_validator import is_valid_api_url, normalize_api_url, InvalidApiUrlError
from .sanitizer import (
    sanitize_text, sanitize_domain, sanitize_description, sanitize_user_id
)
