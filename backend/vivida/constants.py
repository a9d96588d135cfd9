"""Application-wide constants."""
import enum


class ButtonStyle(str, enum.Enum):
    """Button shapes offered by the theme editor."""
    PILL = "rounded-full"
    ROUNDED = "rounded-lg"
    SQUARE = "square"


# Fixed primary key of the single-row tables (site_theme, contact_info)
SINGLETON_ID = 1

DEFAULT_THEME = {
    "primary_color": "#e11d48",
    "button_style": ButtonStyle.ROUNDED,
    "font_headline": "Anton",
    "font_body": "Inter",
}

DEFAULT_CONTACT_INFO = {
    "email": "hello@vivida.tech",
    "phone": "+1 (234) 567-8900",
    "office_location": "San Francisco, California",
}

# Response messages reused by routes and tests
INVALID_CREDENTIALS = "Invalid credentials"
NOT_AUTHENTICATED = "Not authenticated"
INTERNAL_ERROR = "Internal server error"
