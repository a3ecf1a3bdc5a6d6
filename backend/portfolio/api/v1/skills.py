from portfolio.application.resources import SKILL_IMAGES, SKILL_ITEMS
from . import v1_bp
from ._crud import register_entity_routes

register_entity_routes(v1_bp, "skills", SKILL_ITEMS, "skills")
register_entity_routes(v1_bp, "skill-images", SKILL_IMAGES, "skill_images")
