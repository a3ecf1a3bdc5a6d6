from flask import jsonify

from portfolio.application import sections as service
from portfolio.normalizers.item import normalize_hero_content
from portfolio.normalizers.section import normalize_section
from portfolio.utils.request_data import json_body
from . import v1_bp


# ------------------------
# Sections
# ------------------------

@v1_bp.route("/sections", methods=["GET"])
def list_sections():
    sections = service.list_sections()
    return jsonify([normalize_section(s, include_children=True) for s in sections])


@v1_bp.route("/sections/<section_id>", methods=["GET"])
def get_section(section_id):
    section = service.get_section(section_id)
    return jsonify(normalize_section(section, include_children=True))


@v1_bp.route("/sections", methods=["POST"])
def create_section():
    section = service.create_section(json_body())
    return jsonify(normalize_section(section)), 201


@v1_bp.route("/sections/<section_id>", methods=["PUT"])
def update_section(section_id):
    section = service.update_section(section_id, json_body())
    return jsonify(normalize_section(section))


@v1_bp.route("/sections/<section_id>", methods=["DELETE"])
def delete_section(section_id):
    service.delete_section(section_id)
    return jsonify({"message": "Section deleted successfully"}), 200


@v1_bp.route("/sections/<section_id>/hero", methods=["PUT"])
def upsert_hero(section_id):
    hero = service.upsert_hero(section_id, json_body())
    return jsonify(normalize_hero_content(hero))


# ------------------------
# Reorder
# ------------------------

@v1_bp.route("/sections/reorder", methods=["PUT"])
def reorder_sections():
    result = service.reorder_sections(json_body().get("orderedIds"))
    return jsonify({"message": "Sections reordered successfully.", **result.to_dict()})


@v1_bp.route("/sections/<section_id>/<collection>/reorder", methods=["PUT"])
def reorder_section_children(section_id, collection):
    result = service.reorder_section_children(
        section_id, collection, json_body().get("orderedIds")
    )
    return jsonify({"message": "Items reordered successfully.", **result.to_dict()})
