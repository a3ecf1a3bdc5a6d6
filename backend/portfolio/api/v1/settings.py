from flask import jsonify

from portfolio.application.settings import get_settings, update_settings
from portfolio.normalizers.setting import normalize_setting
from portfolio.utils.request_data import json_body
from . import v1_bp


@v1_bp.route("/settings", methods=["GET"])
def read_settings():
    return jsonify(normalize_setting(get_settings()))


@v1_bp.route("/settings", methods=["PUT"])
def write_settings():
    setting = update_settings(json_body())
    return jsonify(normalize_setting(setting))
