from flask import jsonify

from portfolio.application.crud import (
    EntityResource,
    create_entity,
    delete_entity,
    update_entity,
)
from portfolio.utils.request_data import json_body


def register_entity_routes(bp, path: str, resource: EntityResource, endpoint: str):
    """Registers POST /<path>, PUT /<path>/<id> and DELETE /<path>/<id>."""

    def create():
        entity = create_entity(resource, json_body())
        return jsonify(resource.normalize(entity)), 201

    def update(entity_id):
        entity = update_entity(resource, entity_id, json_body())
        return jsonify(resource.normalize(entity)), 200

    def delete(entity_id):
        delete_entity(resource, entity_id)
        return jsonify({"message": f"{resource.label} deleted successfully"}), 200

    bp.add_url_rule(f"/{path}", f"{endpoint}_create", create, methods=["POST"])
    bp.add_url_rule(f"/{path}/<entity_id>", f"{endpoint}_update", update, methods=["PUT"])
    bp.add_url_rule(f"/{path}/<entity_id>", f"{endpoint}_delete", delete, methods=["DELETE"])
