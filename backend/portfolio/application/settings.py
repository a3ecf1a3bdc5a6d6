from typing import Any, Mapping, Optional, Tuple

from flask import current_app

from portfolio.errors import InvalidInput
from portfolio.extensions import db
from portfolio.models import Setting, DEFAULT_SETTINGS
from portfolio.utils.optimistic_lock import enforce_optimistic_lock
from portfolio.utils.request_data import pick_fields
from portfolio.utils.transaction import transactional

SETTING_FIELDS = {
    "theme": "theme",
    "siteTitle": "site_title",
    "showPortrait": "show_portrait",
    "resumeUrl": "resume_url",
    "globalFontFamily": "global_font_family",
}


def _new_setting() -> Setting:
    setting = Setting()
    for attr, value in DEFAULT_SETTINGS.items():
        setattr(setting, attr, value)
    db.session.add(setting)
    return setting


def _validate(values) -> None:
    for attr, value in values.items():
        if attr == "show_portrait":
            if not isinstance(value, bool):
                raise InvalidInput("showPortrait must be a boolean")
        elif not isinstance(value, str) or not value.strip():
            raise InvalidInput(f"Invalid value for {attr}")


def get_settings() -> Setting:
    """Returns the settings row, creating it with defaults on first read."""
    setting = Setting.query.order_by(Setting.created_at.asc()).first()
    if setting is not None:
        return setting

    with transactional():
        setting = _new_setting()
        db.session.flush()
    current_app.logger.info("Settings not found; created defaults")
    return setting


def update_settings(data: Mapping[str, Any]) -> Setting:
    values = pick_fields(data, SETTING_FIELDS)
    if not values:
        raise InvalidInput("No valid fields provided for update")
    _validate(values)

    setting = Setting.query.order_by(Setting.created_at.asc()).first()
    if setting is not None:
        enforce_optimistic_lock(setting)

    with transactional():
        if setting is None:
            setting = _new_setting()
        for attr, value in values.items():
            setattr(setting, attr, value)
        db.session.flush()

    return setting


def set_resume(url: str, public_id: str) -> Tuple[Setting, Optional[str]]:
    """
    Points the settings at a newly stored resume.

    Returns the settings and the public id of the resume it replaced.
    """
    setting = Setting.query.order_by(Setting.created_at.asc()).first()

    with transactional():
        if setting is None:
            setting = _new_setting()
        previous = setting.resume_public_id
        setting.resume_url = url
        setting.resume_public_id = public_id
        db.session.flush()

    return setting, previous
