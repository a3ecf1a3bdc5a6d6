from flask import jsonify, request

from portfolio.application.categories import create_category, delete_category, list_categories
from portfolio.application.crud import list_entities
from portfolio.application.resources import PROJECT_ITEMS
from portfolio.normalizers.item import normalize_category
from portfolio.utils.request_data import json_body
from . import v1_bp
from ._crud import register_entity_routes

register_entity_routes(v1_bp, "projects", PROJECT_ITEMS, "projects")


@v1_bp.route("/projects", methods=["GET"])
def list_projects():
    section_id = request.args.get("sectionId") or None
    projects = list_entities(PROJECT_ITEMS, section_id)
    return jsonify([PROJECT_ITEMS.normalize(p) for p in projects])


# ------------------------
# Categories
# ------------------------

@v1_bp.route("/categories", methods=["GET"])
def get_categories():
    return jsonify([normalize_category(c) for c in list_categories()])


@v1_bp.route("/categories", methods=["POST"])
def post_category():
    category = create_category(json_body())
    return jsonify(normalize_category(category)), 201


@v1_bp.route("/categories/<category_id>", methods=["DELETE"])
def remove_category(category_id):
    updated = delete_category(category_id)
    return jsonify({
        "message": "Category deleted successfully",
        "projectsUpdated": updated,
    }), 200
