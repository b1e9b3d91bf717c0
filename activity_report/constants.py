RENDER_WIDTH = 550
TICK_STEP_MINUTES = 60

ACTIVITY_PALETTE = [
    "#00FF9B",
    "#4D4DFF",
    "#FF3B5F",
    "#8C52FF",
    "#FFD700",
    "#1ABC9C",
    "#9B59B6",
    "#FF7F50",
    "#3498DB",
    "#F39C12",
]

SCREEN_TIME_COLOR = "#FF3B5F"
GOAL_COLOR = "#4D4DFF"

SCREEN_SERIES_TITLE = "Not-so-useful activities"
PRODUCTIVE_SERIES_TITLE = "Useful activities"

ERROR_CONFIG = "config"
ERROR_NETWORK = "network"
ERROR_NO_DATA = "no_data"
ERROR_MESSAGES = {
    ERROR_CONFIG: "User ID is not specified",
    ERROR_NETWORK: "Failed to load data",
    ERROR_NO_DATA: "No data",
}

WEEKDAY_NAMES = {
    "en": ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"],
    "ru": ["понедельник", "вторник", "среда", "четверг", "пятница", "суббота", "воскресенье"],
}
MONTH_NAMES = {
    "en": [
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ],
    "ru": [
        "января", "февраля", "марта", "апреля", "мая", "июня",
        "июля", "августа", "сентября", "октября", "ноября", "декабря",
    ],
}
REST_DAY_SUFFIX = {
    "en": " (Rest)",
    "ru": " (Отдых)",
}
SUPPORTED_LOCALES = tuple(WEEKDAY_NAMES.keys())
