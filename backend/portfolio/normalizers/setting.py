from .common import with_timestamps


def normalize_setting(setting):
    return with_timestamps(setting, {
        "id": setting.id,
        "theme": setting.theme,
        "siteTitle": setting.site_title,
        "showPortrait": setting.show_portrait,
        "resumeUrl": setting.resume_url,
        "globalFontFamily": setting.global_font_family,
    })


def normalize_identity(user):
    """Public identity of a user; never includes the password hash."""
    return {
        "id": user.id,
        "email": user.email,
        "name": user.name,
        "isAdmin": bool(user.is_admin),
    }
