"""Stylesheet injected into host pages: widget chrome plus the per-profile body rules."""

STYLE_ELEMENT_ID = 'comrade-widget-styles'

WIDGET_STYLES = """
.comrade-widget-button {
    position: fixed;
    bottom: 20px;
    right: 20px;
    width: 60px;
    height: 60px;
    border-radius: 50%;
    background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
    color: white;
    border: none;
    cursor: pointer;
    box-shadow: 0 4px 12px rgba(0, 0, 0, 0.3);
    z-index: 999999;
    display: flex;
    align-items: center;
    justify-content: center;
    font-size: 24px;
}

.comrade-widget-button:focus-visible {
    outline: 3px solid #fef08a;
    outline-offset: 2px;
}

.comrade-widget-panel {
    position: fixed;
    bottom: 100px;
    right: 20px;
    width: 350px;
    max-height: 600px;
    background: #1a1a1a;
    border-radius: 12px;
    box-shadow: 0 8px 32px rgba(0, 0, 0, 0.5);
    z-index: 999998;
    display: none;
    overflow: hidden;
    font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif;
}

.comrade-widget-panel.open {
    display: flex;
    flex-direction: column;
}

.comrade-widget-header {
    background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
    padding: 20px;
    color: white;
}

.comrade-widget-header h3 { margin: 0; font-size: 18px; font-weight: 600; }
.comrade-widget-header p { margin: 5px 0 0 0; font-size: 12px; opacity: 0.9; }

.comrade-widget-content {
    padding: 20px;
    overflow-y: auto;
    max-height: 480px;
}

.comrade-widget-message { color: #999; text-align: center; }
.comrade-widget-message.error { color: #f88; }

.comrade-profile-card {
    background: #2a2a2a;
    border: 2px solid #3a3a3a;
    border-radius: 8px;
    padding: 15px;
    margin-bottom: 12px;
    cursor: pointer;
}

.comrade-profile-card:hover,
.comrade-profile-card.active {
    border-color: #667eea;
}

.comrade-profile-card.active {
    background: #2d2d3d;
    box-shadow: 0 0 10px rgba(102, 126, 234, 0.3);
}

.comrade-profile-card h4 { margin: 0 0 8px 0; color: white; font-size: 16px; font-weight: 600; }
.comrade-profile-card p { margin: 0; color: #aaa; font-size: 13px; line-height: 1.4; }

/* Profile rules */
body.comrade-dyslexia {
    letter-spacing: 0.12em !important;
    word-spacing: 0.16em !important;
    line-height: 1.8 !important;
}

body.comrade-dyslexia * { font-size: 1.1em !important; }

body.comrade-adhd { font-size: 1.15em !important; }

body.comrade-adhd .comrade-highlight {
    background-color: #fef08a !important;
    padding: 2px 4px;
    border-radius: 3px;
    font-weight: 600;
}

body.comrade-low-vision { font-size: 1.3em !important; }
body.comrade-low-vision * { font-weight: 600 !important; }

body.comrade-high-contrast {
    filter: contrast(1.5) !important;
    background: #000 !important;
    color: #fff !important;
}

body.comrade-motor-impairment a,
body.comrade-motor-impairment button,
body.comrade-motor-impairment input,
body.comrade-motor-impairment [role="button"] {
    min-width: 44px !important;
    min-height: 44px !important;
    padding: 12px !important;
}

body.comrade-reduced-motion * {
    animation: none !important;
    transition: none !important;
}

@media (max-width: 768px) {
    .comrade-widget-panel {
        width: calc(100vw - 40px);
        right: 20px;
        left: 20px;
        bottom: 90px;
    }
}
"""
