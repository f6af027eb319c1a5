"""
File upload endpoint.

Files come back inline as base64 data URLs, ready to be stored in a post's
media fields or a client's contract reference.
"""
import base64

from flask import Blueprint, request, jsonify, current_app
from flask_jwt_extended import jwt_required

bp = Blueprint('uploads', __name__)


def to_data_url(content: bytes, mimetype: str) -> str:
    encoded = base64.b64encode(content).decode('ascii')
    return f"data:{mimetype or 'application/octet-stream'};base64,{encoded}"


@bp.route('', methods=['POST'])
@jwt_required()
def upload_file():
    """
    Upload a single file (multipart field `file`).

    Returns:
        201: {"file_url": "data:<mimetype>;base64,...", "file_name": ..., "size": ...}
        400: No file, or file larger than MAX_UPLOAD_BYTES
    """
    upload = request.files.get('file')
    if upload is None or not upload.filename:
        return jsonify({"error": "No file provided"}), 400

    max_bytes = current_app.config.get('MAX_UPLOAD_BYTES')
    content = upload.read(max_bytes + 1)
    if len(content) > max_bytes:
        return jsonify({"error": f"File too large (max {max_bytes} bytes)"}), 400

    current_app.logger.info(f"Upload: received file_name={upload.filename}, size={len(content)}")
    return jsonify({
        "file_url": to_data_url(content, upload.mimetype),
        "file_name": upload.filename,
        "size": len(content)
    }), 201
