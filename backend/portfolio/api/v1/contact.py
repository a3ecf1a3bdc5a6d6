from flask import jsonify

from portfolio.application.contact import send_contact_message
from portfolio.application.resources import CONTACT_INFO
from portfolio.utils.request_data import json_body
from . import v1_bp
from ._crud import register_entity_routes

register_entity_routes(v1_bp, "contact-info", CONTACT_INFO, "contact_info")


@v1_bp.route("/contact-form", methods=["POST"])
def contact_form():
    send_contact_message(json_body())
    return jsonify({"message": "Message sent successfully!"}), 200
