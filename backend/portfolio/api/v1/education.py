from portfolio.application.resources import EDUCATION_IMAGES, EDUCATION_ITEMS
from . import v1_bp
from ._crud import register_entity_routes

register_entity_routes(v1_bp, "education", EDUCATION_ITEMS, "education")
register_entity_routes(v1_bp, "education-images", EDUCATION_IMAGES, "education_images")
