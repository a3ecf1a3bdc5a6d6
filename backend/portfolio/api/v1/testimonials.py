from portfolio.application.resources import TESTIMONIALS
from . import v1_bp
from ._crud import register_entity_routes

register_entity_routes(v1_bp, "testimonials", TESTIMONIALS, "testimonials")
