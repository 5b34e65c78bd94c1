"""
Profile Constants

The fixed catalog of accessibility profiles and the body classes,
stylesheet hooks and keywords the widget uses to apply them.
"""

DEFAULT_PROFILE = 'standard'

# Read-only catalog served by /api/profiles
PROFILES = [
    {
        'id': 'standard',
        'name': 'Standard UI',
        'description': 'Default interface without modifications',
    },
    {
        'id': 'dyslexia',
        'name': 'Dyslexia Support',
        'description': 'Enhanced readability with adjusted spacing and fonts',
        'features': ['increased-spacing', 'larger-text', 'dyslexia-font-option'],
    },
    {
        'id': 'adhd',
        'name': 'ADHD Focus',
        'description': 'Reduced distractions with focus enhancements',
        'features': ['focus-mode', 'tooltips', 'highlighted-terms'],
    },
    {
        'id': 'low-vision',
        'name': 'Low Vision Support',
        'description': 'High contrast and larger text for better visibility',
        'features': ['high-contrast', 'zoom', 'simplified-layout'],
    },
    {
        'id': 'motor-impairment',
        'name': 'Motor Impairment',
        'description': 'Larger click targets and keyboard navigation',
        'features': ['large-targets', 'keyboard-nav', 'reduced-motion'],
    },
]

PROFILE_IDS = frozenset(p['id'] for p in PROFILES)

# Body classes added for each profile (CSS selectors key off these)
PROFILE_CLASSES = {
    'standard': (),
    'dyslexia': ('comrade-dyslexia',),
    'adhd': ('comrade-adhd',),
    'low-vision': ('comrade-low-vision', 'comrade-high-contrast'),
    'motor-impairment': ('comrade-motor-impairment', 'comrade-reduced-motion'),
}

# Every class a profile may leave on <body>; cleared before each activation
MARKER_CLASSES = (
    'comrade-dyslexia',
    'comrade-adhd',
    'comrade-low-vision',
    'comrade-motor-impairment',
    'comrade-high-contrast',
    'comrade-reduced-motion',
)

# Profiles that also rewrite text nodes to highlight keywords
HIGHLIGHT_PROFILES = {'adhd'}

HIGHLIGHT_KEYWORDS = (
    'important', 'note', 'warning', 'attention', 'focus', 'key', 'critical',
)

HIGHLIGHT_CLASS = 'comrade-highlight'

# Widget-owned elements
BUTTON_CLASS = 'comrade-widget-button'
PANEL_CLASS = 'comrade-widget-panel'
CARD_CLASS = 'comrade-profile-card'
PROFILES_CONTAINER_ID = 'comrade-profiles-container'
