from flask import jsonify, request

from portfolio.application.uploads import upload_image, upload_resume
from . import v1_bp


@v1_bp.route("/images/upload", methods=["POST"])
def post_image():
    blob = upload_image(request.files.get("imageFile"))
    return jsonify({
        "message": "Image uploaded successfully",
        "secure_url": blob.url,
        "public_id": blob.public_id,
        "original_filename": blob.filename,
        "bytes": blob.size,
        "format": blob.content_type.split("/")[-1],
    }), 201


@v1_bp.route("/resume/upload", methods=["POST"])
def post_resume():
    setting, blob = upload_resume(request.files.get("resumeFile"))
    return jsonify({
        "message": "Resume uploaded successfully",
        "resumeUrl": setting.resume_url,
        "blob": blob.to_dict(),
    }), 200
