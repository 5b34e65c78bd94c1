"""
Page Document Module

Wraps a parsed host page (BeautifulSoup) with the operations the widget
performs on it: reading the embed config, injecting the stylesheet and
UI, toggling body classes and highlighting keywords in text nodes.
"""

import re

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString

from constants import (
    BUTTON_CLASS, PANEL_CLASS, CARD_CLASS, HIGHLIGHT_CLASS, PROFILES_CONTAINER_ID
)
from .styles import STYLE_ELEMENT_ID

EMBED_TOKEN_ATTR = 'data-comrade-token'

# Text under these elements is never rewritten
SKIPPED_TAGS = {'script', 'style'}
SKIPPED_CLASSES = {BUTTON_CLASS, PANEL_CLASS, HIGHLIGHT_CLASS}


def get_classes(tag):
    """Class names of a tag as a list (parsed tags give lists, built ones may give strings)."""
    value = tag.get('class') or []
    if isinstance(value, str):
        value = value.split()
    return list(value)


class TagClassList:
    """Class-list view over a BeautifulSoup tag's `class` attribute."""

    def __init__(self, tag):
        self.tag = tag

    def add(self, *names):
        classes = get_classes(self.tag)
        for name in names:
            if name not in classes:
                classes.append(name)
        if classes:
            self.tag['class'] = classes

    def remove(self, *names):
        classes = [c for c in get_classes(self.tag) if c not in names]
        if classes:
            self.tag['class'] = classes
        elif self.tag.has_attr('class'):
            del self.tag['class']

    def contains(self, name):
        return name in get_classes(self.tag)

    def toggle(self, name, force=None):
        """Add or remove `name`; returns whether it is present afterwards."""
        present = (not self.contains(name)) if force is None else bool(force)
        if present:
            self.add(name)
        else:
            self.remove(name)
        return present

    def __iter__(self):
        return iter(get_classes(self.tag))


def keyword_pattern(keywords):
    """Case-insensitive whole-word pattern matching any of `keywords`."""
    alternatives = '|'.join(re.escape(k) for k in keywords)
    return re.compile(rf'\b({alternatives})\b', re.IGNORECASE)


class Page:
    """A host page the widget is embedded in."""

    def __init__(self, soup):
        self.soup = soup

    @classmethod
    def from_html(cls, html):
        return cls(BeautifulSoup(html, 'html.parser'))

    def __str__(self):
        return str(self.soup)

    # --------------------------------------------
    # Structure
    # --------------------------------------------

    @property
    def root(self):
        """The <html> element, or the document itself for fragments without one."""
        html = self.soup.html
        return html if html is not None else self.soup

    @property
    def head(self):
        """The <head> element, created at the top of <html> if missing."""
        if self.soup.head is None:
            root = self.root
            # after the doctype and any leading comments
            position = 0
            for element in root.contents:
                if not isinstance(element, PreformattedString):
                    break
                position += 1
            head = self.soup.new_tag('head')
            root.insert(position, head)
            return head
        return self.soup.head

    @property
    def body(self):
        """The <body> element, created (wrapping the loose content of <html>) if missing."""
        if self.soup.body is None:
            root = self.root
            body = self.soup.new_tag('body')
            for element in list(root.contents):
                if getattr(element, 'name', None) == 'head':
                    continue
                if isinstance(element, PreformattedString):
                    continue
                body.append(element.extract())
            root.append(body)
        return self.soup.body

    @property
    def body_classes(self):
        return TagClassList(self.body)

    def read_embed_token(self):
        """Token from the embedding <script data-comrade-token="..."> tag, or None."""
        script = self.soup.find('script', attrs={EMBED_TOKEN_ATTR: True})
        if script is None:
            return None
        token = (script.get(EMBED_TOKEN_ATTR) or '').strip()
        return token or None

    # --------------------------------------------
    # Widget UI
    # --------------------------------------------

    def inject_styles(self, css):
        """Add (or refresh) the widget's <style> element in <head>."""
        style = self.soup.find('style', id=STYLE_ELEMENT_ID)
        if style is None:
            style = self.soup.new_tag('style', id=STYLE_ELEMENT_ID)
            self.head.append(style)
        style.string = css
        return style

    def create_widget(self):
        """Append the floating button and the (closed) settings panel to <body>."""
        button = self.soup.new_tag('button', attrs={
            'type': 'button',
            'aria-label': 'Open accessibility options',
            'aria-expanded': 'false',
        })
        button['class'] = [BUTTON_CLASS]
        button.string = '♿'

        panel = self.soup.new_tag('div', attrs={'role': 'dialog', 'aria-label': 'Accessibility Settings'})
        panel['class'] = [PANEL_CLASS]

        header = self.soup.new_tag('div')
        header['class'] = ['comrade-widget-header']
        title = self.soup.new_tag('h3')
        title.string = 'Accessibility Settings'
        subtitle = self.soup.new_tag('p')
        subtitle.string = 'Choose your preferred profile'
        header.append(title)
        header.append(subtitle)

        content = self.soup.new_tag('div', id=PROFILES_CONTAINER_ID)
        content['class'] = ['comrade-widget-content']
        content.append(self._message('Loading profiles...'))

        panel.append(header)
        panel.append(content)
        self.body.append(button)
        self.body.append(panel)
        return button, panel

    def _message(self, text, error=False):
        message = self.soup.new_tag('p')
        message['class'] = ['comrade-widget-message', 'error'] if error else ['comrade-widget-message']
        message.string = text
        return message

    @property
    def button(self):
        return self.soup.find(class_=BUTTON_CLASS)

    @property
    def panel(self):
        return self.soup.find(class_=PANEL_CLASS)

    @property
    def profiles_container(self):
        return self.soup.find(id=PROFILES_CONTAINER_ID)

    def set_panel_open(self, is_open):
        panel = self.panel
        if panel is None:
            return
        TagClassList(panel).toggle('open', force=is_open)
        if self.button is not None:
            self.button['aria-expanded'] = 'true' if is_open else 'false'

    def render_profiles(self, profiles, current_profile):
        """Replace the panel content with one card per profile."""
        container = self.profiles_container
        if container is None:
            return []
        container.clear()

        cards = []
        for profile in profiles:
            is_active = profile.get('id') == current_profile
            card = self.soup.new_tag('div', attrs={
                'data-profile': profile.get('id', ''),
                'role': 'button',
                'tabindex': '0',
                'aria-pressed': 'true' if is_active else 'false',
            })
            card['class'] = [CARD_CLASS, 'active'] if is_active else [CARD_CLASS]
            name = self.soup.new_tag('h4')
            name.string = profile.get('name', '')
            description = self.soup.new_tag('p')
            description.string = profile.get('description', '')
            card.append(name)
            card.append(description)
            container.append(card)
            cards.append(card)
        return cards

    def render_profiles_error(self):
        container = self.profiles_container
        if container is None:
            return
        container.clear()
        container.append(self._message('Failed to load profiles', error=True))

    def profile_cards(self):
        return self.soup.find_all(class_=CARD_CLASS)

    def mark_active_card(self, profile_id):
        """Reflect the selected profile on the cards (visual state and aria-pressed)."""
        for card in self.profile_cards():
            is_active = card.get('data-profile') == profile_id
            TagClassList(card).toggle('active', force=is_active)
            card['aria-pressed'] = 'true' if is_active else 'false'

    # --------------------------------------------
    # Keyword highlighting
    # --------------------------------------------

    def text_nodes(self):
        """Visible, non-blank text nodes in <body> outside widget-owned and highlighted elements."""
        nodes = []
        for node in self.body.find_all(string=True):
            if isinstance(node, PreformattedString):
                continue  # comments, CDATA, doctype
            if not node.strip():
                continue
            if self._is_skipped(node):
                continue
            nodes.append(node)
        return nodes

    @staticmethod
    def _is_skipped(node):
        for parent in node.parents:
            if parent.name in SKIPPED_TAGS:
                return True
            if SKIPPED_CLASSES.intersection(get_classes(parent)):
                return True
        return False

    def highlight_keywords(self, keywords):
        """
        Wrap every whole-word keyword match in a highlight <span>.

        Each rewritten text node is replaced by a <span> holding the
        plain text pieces and the highlight markers. Words already inside
        a marker are left alone. Returns the number of markers added.
        """
        pattern = keyword_pattern(keywords)
        added = 0

        for node in self.text_nodes():
            text = str(node)
            matches = list(pattern.finditer(text))
            if not matches:
                continue

            wrapper = self.soup.new_tag('span')
            position = 0
            for match in matches:
                if match.start() > position:
                    wrapper.append(NavigableString(text[position:match.start()]))
                marker = self.soup.new_tag('span')
                marker['class'] = [HIGHLIGHT_CLASS]
                marker.string = match.group(0)
                wrapper.append(marker)
                position = match.end()
                added += 1
            if position < len(text):
                wrapper.append(NavigableString(text[position:]))

            node.replace_with(wrapper)

        return added

    def highlighted_terms(self):
        return [tag.get_text() for tag in self.soup.find_all(class_=HIGHLIGHT_CLASS)]
