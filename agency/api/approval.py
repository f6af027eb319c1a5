"""
Public approval surface.

No login: the `token` query parameter from the shared link is the only
credential, and it is checked on every request.

    GET  /api/approval?token=<token>
    POST /api/approval/posts/<post_id>/approve?token=<token>
    POST /api/approval/posts/<post_id>/reject?token=<token>   {"reason": "..."}
    POST /api/approval/posts/<post_id>/boost?token=<token>    {"notes": "..."}
"""
from flask import Blueprint, request, jsonify, current_app

from agency.extensions import limiter
from agency.services import approval_workflow

bp = Blueprint('approval', __name__)


def _rate_limit():
    return current_app.config.get('APPROVAL_RATE_LIMIT', '60 per minute')


@bp.route('', methods=['GET'])
@limiter.limit(_rate_limit)
def pending_posts():
    """
    Posts awaiting the client's approval.

    Returns:
        200: {"client": {...}, "posts": [...]}
        404: Unknown token
        410: Link expired or deactivated
    """
    client, posts = approval_workflow.get_pending_posts(request.args.get('token'))
    return jsonify({
        "client": client.to_public_dict(),
        "posts": [post.to_dict() for post in posts]
    }), 200


@bp.route('/posts/<post_id>/approve', methods=['POST'])
@limiter.limit(_rate_limit)
def approve(post_id):
    post = approval_workflow.approve_post(request.args.get('token'), post_id)
    return jsonify({"message": "Post approved", "post": post.to_dict()}), 200


@bp.route('/posts/<post_id>/reject', methods=['POST'])
@limiter.limit(_rate_limit)
def reject(post_id):
    data = request.get_json(silent=True) or {}
    post = approval_workflow.reject_post(request.args.get('token'), post_id, data.get('reason'))
    return jsonify({"message": "Post rejected", "post": post.to_dict()}), 200


@bp.route('/posts/<post_id>/boost', methods=['POST'])
@limiter.limit(_rate_limit)
def boost(post_id):
    data = request.get_json(silent=True) or {}
    post = approval_workflow.request_boost(request.args.get('token'), post_id, data.get('notes'))
    return jsonify({"message": "Boost requested", "post": post.to_dict()}), 200
