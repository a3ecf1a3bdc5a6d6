from flask import jsonify, request

from portfolio.application.crud import list_entities
from portfolio.application.resources import CONTENT_BLOCKS, IMAGE_BLOCKS, TEXT_BLOCKS
from portfolio.errors import InvalidInput
from . import v1_bp
from ._crud import register_entity_routes

register_entity_routes(v1_bp, "textblocks", TEXT_BLOCKS, "textblocks")
register_entity_routes(v1_bp, "imageblocks", IMAGE_BLOCKS, "imageblocks")
register_entity_routes(
    v1_bp, "custom-section-content-blocks", CONTENT_BLOCKS, "content_blocks"
)


@v1_bp.route("/custom-section-content-blocks", methods=["GET"])
def list_content_blocks():
    section_id = request.args.get("sectionId")
    if not section_id:
        raise InvalidInput("sectionId query parameter is required")

    blocks = list_entities(CONTENT_BLOCKS, section_id)
    return jsonify([CONTENT_BLOCKS.normalize(b) for b in blocks])
