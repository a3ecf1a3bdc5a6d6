from portfolio.application.resources import EXPERIENCE_IMAGES, EXPERIENCE_ITEMS
from . import v1_bp
from ._crud import register_entity_routes

register_entity_routes(v1_bp, "experience", EXPERIENCE_ITEMS, "experience")
register_entity_routes(v1_bp, "experience-images", EXPERIENCE_IMAGES, "experience_images")
