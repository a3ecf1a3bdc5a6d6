from flask import jsonify

from portfolio.application.auth import verify_credentials
from portfolio.normalizers.setting import normalize_identity
from portfolio.utils.request_data import json_body
from . import v1_bp


@v1_bp.route("/auth/login", methods=["POST"])
def login():
    user = verify_credentials(json_body())
    return jsonify(normalize_identity(user)), 200
