"""Tests for the embeddable widget."""

import logging

import pytest

from widget import (
    ApiClient, Page, SetClassList, WidgetApiError, WidgetSession,
    apply_profile_directives, embed, get_user_id, resolve_profile,
    FAILED, READY, UNINITIALIZED,
)
from widget.session import USER_ID_STORAGE_KEY

API_URL = 'http://localhost:3000/api'


def host_page(token, body='<p>This is important</p>'):
    return (
        '<html><head><title>Host</title></head><body>'
        f'{body}'
        f'<script src="/comrade-widget.js" data-comrade-token="{token}"></script>'
        '</body></html>'
    )


class TestDirectives:
    """Tests for applying profile classes to a class list."""

    def test_profile_classes_replace_previous(self):
        classes = SetClassList(['page', 'comrade-dyslexia'])

        apply_profile_directives(classes, 'low-vision')

        assert list(classes) == ['page', 'comrade-low-vision', 'comrade-high-contrast']

    def test_standard_clears_markers(self):
        classes = SetClassList(['comrade-motor-impairment', 'comrade-reduced-motion', 'dark'])

        assert apply_profile_directives(classes, 'standard') is False
        assert list(classes) == ['dark']

    def test_adhd_requests_highlighting(self):
        classes = SetClassList()
        assert apply_profile_directives(classes, 'adhd') is True
        assert classes.contains('comrade-adhd')

    def test_reapplying_is_idempotent(self):
        classes = SetClassList()
        apply_profile_directives(classes, 'motor-impairment')
        apply_profile_directives(classes, 'motor-impairment')
        assert list(classes) == ['comrade-motor-impairment', 'comrade-reduced-motion']

    def test_unknown_profile_falls_back_to_standard(self):
        classes = SetClassList(['comrade-adhd'])
        apply_profile_directives(classes, 'sparkles')
        assert len(classes) == 0
        assert resolve_profile('sparkles') == 'standard'


class TestPage:
    """Tests for the page document operations."""

    def test_read_embed_token(self):
        page = Page.from_html(host_page('comrade_abc'))
        assert page.read_embed_token() == 'comrade_abc'

    def test_read_embed_token_missing(self):
        page = Page.from_html('<html><body><script src="x.js"></script></body></html>')
        assert page.read_embed_token() is None

    def test_body_classes(self):
        page = Page.from_html('<html><body class="home"><p>x</p></body></html>')
        page.body_classes.add('comrade-adhd')
        assert page.soup.body['class'] == ['home', 'comrade-adhd']

        page.body_classes.remove('home', 'comrade-adhd')
        assert not page.soup.body.has_attr('class')

    def test_highlight_wraps_keyword_once(self):
        page = Page.from_html('<html><body><p>This is important</p></body></html>')

        assert page.highlight_keywords(['important']) == 1

        markers = page.soup.select('.comrade-highlight')
        assert [m.get_text() for m in markers] == ['important']
        assert page.soup.p.get_text() == 'This is important'

    def test_highlight_does_not_double_wrap(self):
        page = Page.from_html('<html><body><p>This is important</p></body></html>')
        page.highlight_keywords(['important'])

        assert page.highlight_keywords(['important']) == 0
        assert len(page.soup.select('.comrade-highlight')) == 1
        assert page.soup.select('.comrade-highlight .comrade-highlight') == []

    def test_highlight_is_case_insensitive_and_whole_word(self):
        page = Page.from_html(
            '<html><body><p>NOTE: the keyboard is Key to focus.</p></body></html>'
        )
        page.highlight_keywords(['note', 'key', 'focus'])

        assert page.highlighted_terms() == ['NOTE', 'Key', 'focus']

    def test_highlight_skips_scripts_styles_and_blank_nodes(self):
        page = Page.from_html(
            '<html><head><style>.important { color: red }</style></head><body>'
            '<script>var important = 1;</script>'
            '<style>.note {}</style>'
            '<p>   </p>'
            '<!-- important comment -->'
            '<div>critical path</div>'
            '</body></html>'
        )
        page.highlight_keywords(['important', 'note', 'critical'])

        assert page.highlighted_terms() == ['critical']
        assert 'var important = 1;' in page.soup.script.string

    def test_highlight_escapes_text(self):
        page = Page.from_html('<html><body><p>&lt;b&gt;important&lt;/b&gt;</p></body></html>')
        page.highlight_keywords(['important'])

        assert page.soup.find('b') is None
        assert page.soup.p.get_text() == '<b>important</b>'

    def test_highlight_skips_widget(self):
        page = Page.from_html('<html><body><p>Key facts</p></body></html>')
        page.create_widget()
        page.render_profiles([{'id': 'adhd', 'name': 'ADHD Focus',
                               'description': 'Reduced distractions with focus enhancements'}], 'standard')

        page.highlight_keywords(['key', 'focus'])

        assert page.highlighted_terms() == ['Key']

    def test_inject_styles_once(self):
        page = Page.from_html('<p>no head</p>')
        page.inject_styles('body {}')
        page.inject_styles('body { color: red }')

        styles = page.soup.find_all('style')
        assert len(styles) == 1
        assert styles[0].string == 'body { color: red }'
        assert styles[0].parent.name == 'head'

    def test_head_created_after_doctype(self):
        page = Page.from_html('<!DOCTYPE html><body><p>hi</p></body>')
        page.inject_styles('x')

        html = str(page)
        assert html.startswith('<!DOCTYPE html>')
        assert html.index('<head>') < html.index('<body>')
        assert page.soup.head.parent is page.soup
        assert page.soup.body.p.get_text() == 'hi'

    def test_body_created_inside_html(self):
        page = Page.from_html(
            '<html><head><title>Important notice</title></head><p>This is important</p></html>'
        )
        page.body_classes.add('comrade-adhd')

        assert page.soup.body.parent is page.soup.html
        assert page.soup.head.parent is page.soup.html
        assert page.soup.body.find('head') is None
        assert page.soup.body.p.get_text() == 'This is important'

        assert page.highlight_keywords(['important']) == 1
        assert page.highlighted_terms() == ['important']
        assert page.soup.title.string == 'Important notice'

    def test_mark_active_card(self):
        page = Page.from_html('<html><body></body></html>')
        page.create_widget()
        page.render_profiles([
            {'id': 'standard', 'name': 'Standard UI', 'description': ''},
            {'id': 'adhd', 'name': 'ADHD Focus', 'description': ''},
        ], 'standard')

        page.mark_active_card('adhd')

        cards = {c['data-profile']: c for c in page.profile_cards()}
        assert cards['adhd']['aria-pressed'] == 'true'
        assert 'active' in cards['adhd']['class']
        assert cards['standard']['aria-pressed'] == 'false'
        assert 'active' not in cards['standard']['class']


class TestUserId:
    """Tests for the local user id."""

    def test_generated_and_stored(self):
        storage = {}
        user_id = get_user_id(storage)

        assert user_id.startswith('user_')
        assert len(user_id) == len('user_') + 16
        assert storage[USER_ID_STORAGE_KEY] == user_id
        assert get_user_id(storage) == user_id

    def test_existing_id_is_reused(self):
        assert get_user_id({USER_ID_STORAGE_KEY: 'user_fixed'}) == 'user_fixed'


class TestApiClient:
    """Tests for the widget's HTTP client."""

    def test_sends_token_header(self, http_session, issue_token):
        token = issue_token(domain='blog.example.com')
        client = ApiClient(API_URL + '/', token, session=http_session)

        assert client.validate_token()['domain'] == 'blog.example.com'
        assert http_session.calls == [('GET', '/api/tokens/validate')]

    def test_error_status_raises(self, http_session):
        client = ApiClient(API_URL, 'garbage', session=http_session)

        with pytest.raises(WidgetApiError) as excinfo:
            client.validate_token()
        assert excinfo.value.status_code == 403

    def test_network_error_raises(self, offline_session):
        client = ApiClient(API_URL, 'comrade_x', session=offline_session)

        with pytest.raises(WidgetApiError) as excinfo:
            client.get_profiles()
        assert excinfo.value.status_code is None


class TestWidgetSession:
    """Tests for the widget lifecycle against the real API."""

    def test_embed_renders_widget(self, http_session, issue_token):
        token = issue_token()
        session = embed(host_page(token), storage={}, http_session=http_session)

        assert session.state == READY
        page = session.page
        assert page.soup.find('style', id='comrade-widget-styles') is not None
        assert page.button is not None
        assert page.panel is not None
        assert len(page.profile_cards()) == 5
        assert session.current_profile == 'standard'

    def test_invalid_token_does_not_render(self, http_session, caplog):
        with caplog.at_level(logging.ERROR):
            session = embed(host_page('comrade_bogus'), storage={}, http_session=http_session)

        assert session.state == FAILED
        assert session.page.button is None
        assert session.page.soup.find('style') is None
        assert http_session.calls == [('GET', '/api/tokens/validate')]
        assert 'Invalid API token' in caplog.text

    def test_missing_token_is_not_embedded(self, http_session):
        page = '<html><body><script src="/comrade-widget.js"></script></body></html>'
        assert embed(page, http_session=http_session) is None
        assert http_session.calls == []

    def test_invalid_api_url_is_not_embedded(self, http_session):
        window = {'COMRADE_API_URL': 'javascript:alert(1)'}
        assert embed(host_page('comrade_x'), window=window, http_session=http_session) is None

    def test_custom_api_url(self, http_session, issue_token):
        token = issue_token()
        window = {'COMRADE_API_URL': 'https://a11y.example.net/api/'}
        session = embed(host_page(token), window=window, http_session=http_session)

        assert session.client.base_url == 'https://a11y.example.net/api'
        assert session.state == READY

    def test_activation_persists_and_reloads(self, http_session, issue_token):
        token = issue_token()
        storage = {}
        session = embed(host_page(token), storage=storage, http_session=http_session)

        session.select_card('dyslexia')
        assert session.page.body_classes.contains('comrade-dyslexia')

        # A later page load for the same user restores the profile
        later = embed(host_page(token), storage=storage, http_session=http_session)
        assert later.current_profile == 'dyslexia'
        assert later.page.body_classes.contains('comrade-dyslexia')
        cards = {c['data-profile']: c for c in later.page.profile_cards()}
        assert cards['dyslexia']['aria-pressed'] == 'true'

    def test_other_users_do_not_see_profile(self, http_session, issue_token):
        token = issue_token()
        first = embed(host_page(token), storage={}, http_session=http_session)
        first.activate_profile('low-vision')

        other = embed(host_page(token), storage={}, http_session=http_session)
        assert other.current_profile == 'standard'
        assert list(other.page.body_classes) == []

    def test_adhd_highlights_once(self, http_session, issue_token):
        token = issue_token()
        session = embed(host_page(token), storage={}, http_session=http_session)

        session.activate_profile('adhd')
        session.activate_profile('adhd')

        assert session.page.highlighted_terms() == ['important']
        assert session.page.body_classes.contains('comrade-adhd')

    def test_switching_away_keeps_highlights(self, http_session, issue_token):
        token = issue_token()
        session = embed(host_page(token), storage={}, http_session=http_session)

        session.activate_profile('adhd')
        session.activate_profile('standard')

        assert not session.page.body_classes.contains('comrade-adhd')
        assert session.page.highlighted_terms() == ['important']

    def test_keyboard_activation(self, http_session, issue_token):
        token = issue_token()
        session = embed(host_page(token), storage={}, http_session=http_session)

        assert session.press_card_key('motor-impairment', 'Tab') is None
        assert session.current_profile == 'standard'

        session.press_card_key('motor-impairment', 'Enter')
        assert session.current_profile == 'motor-impairment'
        assert session.page.body_classes.contains('comrade-reduced-motion')

    def test_toggle_panel(self, http_session, issue_token):
        token = issue_token()
        session = embed(host_page(token), storage={}, http_session=http_session)

        assert session.toggle_panel() is True
        assert 'open' in session.page.panel['class']
        assert session.page.button['aria-expanded'] == 'true'

        assert session.toggle_panel() is False
        assert 'open' not in session.page.panel['class']

    def test_toggle_panel_before_init(self, offline_session):
        session = WidgetSession(Page.from_html('<p>x</p>'), ApiClient(API_URL, 't', session=offline_session), 'u')
        assert session.state == UNINITIALIZED
        assert session.toggle_panel() is False

    def test_save_failure_keeps_page_state(self, http_session, issue_token, admin_key, client, caplog):
        token = issue_token()
        session = embed(host_page(token), storage={}, http_session=http_session)
        client.post('/api/tokens/deactivate', json={'token': token, 'adminKey': admin_key})

        with caplog.at_level(logging.ERROR):
            session.activate_profile('low-vision')

        assert session.current_profile == 'low-vision'
        assert session.page.body_classes.contains('comrade-high-contrast')
        assert 'Failed to save settings' in caplog.text

    def test_profiles_failure_shows_message(self, http_session, issue_token, monkeypatch):
        token = issue_token()

        def unavailable(self):
            raise WidgetApiError("API error: Service Unavailable", status_code=503)

        monkeypatch.setattr(ApiClient, 'get_profiles', unavailable)
        session = embed(host_page(token), storage={}, http_session=http_session)

        assert session.state == READY
        assert session.page.profile_cards() == []
        assert 'Failed to load profiles' in session.page.profiles_container.get_text()

    def test_handle(self, http_session, issue_token):
        token = issue_token()
        storage = {}
        session = embed(host_page(token), storage=storage, http_session=http_session)
        handle = session.handle()

        handle.activate_profile('adhd')
        assert handle.get_current_profile() == 'adhd'
        assert handle.save_settings() is True

        data = handle.load_settings()
        assert data['profile'] == 'adhd'
        assert data['customSettings'] == {}

    def test_unknown_profile_activates_standard(self, http_session, issue_token):
        token = issue_token()
        session = embed(host_page(token), storage={}, http_session=http_session)
        session.activate_profile('dyslexia')

        assert session.activate_profile('sparkles') == 'standard'
        assert list(session.page.body_classes) == []
