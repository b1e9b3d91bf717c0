import streamlit as st

THEME_PRESETS = {
    "dark": {
        "bg_main": "#12131B",
        "bg_glow": "#1C1D2B",
        "bg_card": "#191A23",
        "border": "#8C52FF",
        "text_main": "#E0E0E0",
        "text_soft": "#9A9AAE",
        "heading": "#00FF9B",
        "ruler": "#777777",
        "plot_grid": "rgba(77, 77, 255, 0.2)",
        "track": "rgba(255, 255, 255, 0.06)",
        "alert": "#FF3B5F",
        "alert_glow": "rgba(255, 59, 95, 0.5)",
    },
    "light": {
        "bg_main": "#F7F3ED",
        "bg_glow": "#EEE2D3",
        "bg_card": "#FFF9F1",
        "border": "#C4B59F",
        "text_main": "#1B1B1B",
        "text_soft": "#5D5D5D",
        "heading": "#2E7D5B",
        "ruler": "#8A8A8A",
        "plot_grid": "#D9CCBB",
        "track": "rgba(0, 0, 0, 0.06)",
        "alert": "#D93A55",
        "alert_glow": "rgba(217, 58, 85, 0.45)",
    },
}


def ensure_theme_state():
    if st.session_state.get("ui_theme") not in THEME_PRESETS:
        st.session_state["ui_theme"] = "dark"
    return st.session_state["ui_theme"]


def get_active_theme():
    name = ensure_theme_state()
    return name, THEME_PRESETS[name]


def toggle_theme():
    st.session_state["ui_theme"] = "light" if ensure_theme_state() == "dark" else "dark"


def inject_theme_css() -> dict:
    active_name, active_theme = get_active_theme()
    theme_toggle_icon = "☀️" if active_name == "dark" else "🌙"
    theme_toggle_help = "Switch to light mode" if active_name == "dark" else "Switch to dark mode"

    theme_vars_css = f"""
:root {{
    --bg-main: {active_theme['bg_main']};
    --bg-glow: {active_theme['bg_glow']};
    --bg-card: {active_theme['bg_card']};
    --border: {active_theme['border']};
    --text-main: {active_theme['text_main']};
    --text-soft: {active_theme['text_soft']};
    --heading: {active_theme['heading']};
    --ruler: {active_theme['ruler']};
    --track: {active_theme['track']};
    --alert: {active_theme['alert']};
    --alert-glow: {active_theme['alert_glow']};
}}
"""

    st.markdown(
        """
<style>
@import url('https://fonts.googleapis.com/css2?family=Rajdhani:wght@500;700&display=swap');
"""
        + theme_vars_css
        + """

html, body, [class*="css"] {
    font-family: 'Rajdhani', sans-serif;
    color: var(--text-main);
}

.stApp {
    background: radial-gradient(1400px 900px at 20% 0%, var(--bg-glow) 0%, var(--bg-main) 58%);
    color: var(--text-main);
}

.page-title {
    font-size: 32px;
    font-weight: 700;
    text-align: center;
}

.card {
    background: var(--bg-card);
    border: 1px solid var(--border);
    border-radius: 14px;
    padding: 16px 18px;
    margin-bottom: 14px;
    box-shadow: 0 12px 26px rgba(0,0,0,0.35);
}

.section-title {
    color: var(--heading);
    font-size: 26px;
    font-weight: 700;
    text-align: center;
    margin-bottom: 20px;
}

.small-label {
    color: var(--text-soft);
    font-size: 12px;
    letter-spacing: 0.2px;
}

.timeline-scroll {
    overflow-x: auto;
}

.minute-ruler {
    position: relative;
    height: 24px;
    margin-bottom: 10px;
    overflow: visible;
}

.minute-tick {
    position: absolute;
    color: var(--ruler);
    font-size: 12px;
    white-space: nowrap;
}

.minute-tick.centered {
    transform: translateX(-50%);
    text-align: center;
}

.minute-tick.pinned {
    transform: translateX(0);
    text-align: left;
    padding-left: 4px;
}

.minute-tick-mark {
    width: 2px;
    height: 8px;
    background-color: var(--ruler);
    margin: 2px auto 0;
}

.activity-track {
    position: relative;
    height: 12px;
    margin-bottom: 10px;
    background: var(--track);
    border-radius: 4px;
}

.activity-segment {
    position: absolute;
    top: 0;
    height: 12px;
    border-radius: 4px;
    transition: width 0.6s ease;
}

.activity-segment.exceeding {
    box-shadow: 0 0 10px 2px var(--alert), 0 0 20px 4px var(--alert-glow);
    animation: pulse 1.5s ease-in-out infinite;
}

@keyframes pulse {
    0% { opacity: 1; }
    50% { opacity: 0.55; }
    100% { opacity: 1; }
}

.activity-legend {
    margin-top: 20px;
}

.legend-row {
    display: flex;
    align-items: center;
    gap: 8px;
    margin-bottom: 6px;
    font-size: 16px;
}

.legend-swatch {
    width: 16px;
    height: 16px;
    border-radius: 3px;
}

.checklist li.done {
    color: var(--heading);
}
</style>
""",
        unsafe_allow_html=True,
    )
    return {
        "ACTIVE_THEME_NAME": active_name,
        "THEME_TOGGLE_ICON": theme_toggle_icon,
        "THEME_TOGGLE_HELP": theme_toggle_help,
        "THEME": active_theme,
    }
