from portfolio.extensions import db
from .base import BaseModel

DEFAULT_SETTINGS = {
    "theme": "dark",
    "site_title": "PORTFOLIO",
    "show_portrait": True,
    "resume_url": "/resume.pdf",
    "global_font_family": "font-sans",
}


class Setting(BaseModel):
    """Site-wide settings; a single row is expected."""

    __tablename__ = "settings"

    theme = db.Column(db.String(20), nullable=False, default=DEFAULT_SETTINGS["theme"])
    site_title = db.Column(db.String(200), nullable=False, default=DEFAULT_SETTINGS["site_title"])
    show_portrait = db.Column(db.Boolean, nullable=False, default=DEFAULT_SETTINGS["show_portrait"])
    resume_url = db.Column(db.String(1024), nullable=False, default=DEFAULT_SETTINGS["resume_url"])
    resume_public_id = db.Column(db.String(512), nullable=True)
    global_font_family = db.Column(
        db.String(100), nullable=False, default=DEFAULT_SETTINGS["global_font_family"]
    )
