"""Site theme singleton."""
from sqlalchemy import Column, Integer, String, DateTime, Enum
from vivida.constants import ButtonStyle, SINGLETON_ID
from vivida.database import Base
from vivida.utils.timestamps import utc_now


class SiteTheme(Base):
    """Colors, button shape and fonts of the public site. Always one row."""
    __tablename__ = "site_theme"

    id = Column(Integer, primary_key=True, default=SINGLETON_ID)
    primary_color = Column(String, nullable=False, default="#e11d48")
    button_style = Column(
        Enum(
            ButtonStyle,
            name="button_style",
            values_callable=lambda styles: [style.value for style in styles],
        ),
        nullable=False,
        default=ButtonStyle.ROUNDED,
    )
    font_headline = Column(String, nullable=False, default="Anton")
    font_body = Column(String, nullable=False, default="Inter")
    updated_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
