"""
Widget Session

One embedded widget instance: its lifecycle state, the user's current
profile and the page it modifies.

Lifecycle: uninitialized -> validating -> ready | failed. While ready the
panel is open or closed; profile activation is independent of the panel.
"""

import logging
import secrets
import string

from constants import DEFAULT_PROFILE, HIGHLIGHT_KEYWORDS
from utils.url_validator import normalize_api_url, InvalidApiUrlError
from .client import ApiClient, WidgetApiError
from .directives import apply_profile_directives, resolve_profile
from .page import Page
from .styles import WIDGET_STYLES

logger = logging.getLogger(__name__)

DEFAULT_API_URL = 'http://localhost:3000/api'
API_URL_SETTING = 'COMRADE_API_URL'
USER_ID_STORAGE_KEY = 'comrade_user_id'
USER_ID_ALPHABET = string.digits + string.ascii_lowercase

# Lifecycle states
UNINITIALIZED = 'uninitialized'
VALIDATING = 'validating'
FAILED = 'failed'
READY = 'ready'

ACTIVATION_KEYS = {'Enter', ' '}


def get_user_id(storage):
    """Stable local user id, generated and stored on first use."""
    user_id = storage.get(USER_ID_STORAGE_KEY)
    if not user_id:
        user_id = 'user_' + ''.join(secrets.choice(USER_ID_ALPHABET) for _ in range(16))
        storage[USER_ID_STORAGE_KEY] = user_id
    return user_id


class WidgetSession:
    """State of one widget embedded in one page."""

    def __init__(self, page, client, user_id):
        self.page = page
        self.client = client
        self.user_id = user_id
        self.state = UNINITIALIZED
        self.current_profile = DEFAULT_PROFILE
        self.custom_settings = {}
        self.panel_open = False
        self.profiles = []

    @property
    def is_ready(self):
        return self.state == READY

    def init(self):
        """
        Validate the token, then render the widget and restore saved settings.

        An invalid token leaves the page untouched and the session failed.
        Returns True when the widget is ready.
        """
        if self.state != UNINITIALIZED:
            return self.is_ready

        self.state = VALIDATING
        try:
            self.client.validate_token()
        except WidgetApiError:
            logger.error("COMRADE Widget: Invalid API token")
            self.state = FAILED
            return False

        self.page.inject_styles(WIDGET_STYLES)
        self.page.create_widget()
        self.state = READY

        self.load_profiles()
        self.load_settings()

        logger.info("COMRADE Widget initialized successfully")
        return True

    def toggle_panel(self):
        """Open or close the settings panel; returns the new open state."""
        if not self.is_ready:
            return False
        self.panel_open = not self.panel_open
        self.page.set_panel_open(self.panel_open)
        return self.panel_open

    def load_profiles(self):
        try:
            self.profiles = self.client.get_profiles()
        except WidgetApiError:
            self.page.render_profiles_error()
            return []
        self.page.render_profiles(self.profiles, self.current_profile)
        return self.profiles

    def activate_profile(self, profile_id, persist=True):
        """
        Apply a profile to the page and (by default) save it.

        Unknown ids fall back to the default profile. Save failures are
        logged and the page keeps the new profile.
        """
        profile_id = resolve_profile(profile_id)

        wants_highlight = apply_profile_directives(self.page.body_classes, profile_id)
        self.current_profile = profile_id
        if wants_highlight:
            self.page.highlight_keywords(HIGHLIGHT_KEYWORDS)

        self.page.mark_active_card(profile_id)
        logger.info("COMRADE: Activated profile - %s", profile_id)

        if persist:
            self.save_settings()
        return profile_id

    def select_card(self, profile_id):
        """Click on a profile card."""
        return self.activate_profile(profile_id)

    def press_card_key(self, profile_id, key):
        """Keyboard activation of a profile card (Enter or Space)."""
        if key in ACTIVATION_KEYS:
            return self.activate_profile(profile_id)
        return None

    def save_settings(self):
        try:
            self.client.save_settings(self.user_id, self.current_profile, self.custom_settings)
        except WidgetApiError as e:
            logger.error("Failed to save settings: %s", e)
            return False
        return True

    def load_settings(self):
        """Fetch saved settings and apply the stored profile. Returns the data or None."""
        try:
            data = self.client.load_settings(self.user_id)
        except WidgetApiError as e:
            logger.error("Failed to load settings: %s", e)
            return None

        if data.get('profile'):
            self.custom_settings = data.get('customSettings') or {}
            self.activate_profile(data['profile'], persist=False)
        return data

    def handle(self):
        return WidgetHandle(self)


class WidgetHandle:
    """Programmatic control exposed to host pages."""

    def __init__(self, session):
        self._session = session

    def activate_profile(self, profile_id):
        return self._session.activate_profile(profile_id)

    def get_current_profile(self):
        return self._session.current_profile

    def save_settings(self):
        return self._session.save_settings()

    def load_settings(self):
        return self._session.load_settings()


def embed(page, window=None, storage=None, http_session=None):
    """
    Embed the widget in a page, the way the script tag does in a browser.

    Args:
        page: Page or raw HTML of the host page
        window: Window-level settings (COMRADE_API_URL)
        storage: Mutable mapping standing in for local storage
        http_session: Optional requests.Session for the API client

    Returns:
        The initialized WidgetSession, or None if the embed config is unusable
    """
    if not isinstance(page, Page):
        page = Page.from_html(page)
    window = window or {}
    storage = storage if storage is not None else {}

    token = page.read_embed_token()
    if not token:
        logger.error("COMRADE Widget: API token not provided. Add data-comrade-token attribute to script tag.")
        return None

    try:
        api_url = normalize_api_url(window.get(API_URL_SETTING) or DEFAULT_API_URL)
    except InvalidApiUrlError as e:
        logger.error("COMRADE Widget: %s", e)
        return None

    client = ApiClient(api_url, token, session=http_session)
    session = WidgetSession(page, client, get_user_id(storage))
    session.init()
    return session
