"""
API endpoints for scheduled posts (operator side)
"""
from datetime import datetime

from flask import Blueprint, request, jsonify, current_app
from flask_jwt_extended import jwt_required, get_jwt_identity
from marshmallow import ValidationError

from agency.models.post import Post
from agency.schemas.post_schema import PostSchema, PostMoveSchema, VersionSchema
from agency.services import posts as post_service
from agency.services.repository import EntityRepository

bp = Blueprint('posts', __name__)

post_schema = PostSchema()
post_move_schema = PostMoveSchema()
version_schema = VersionSchema()


def _parse_day(value, name):
    if not value:
        return None
    try:
        datetime.strptime(value, '%Y-%m-%d')
    except ValueError:
        raise ValidationError({name: [f"{name} must be in YYYY-MM-DD format"]})
    return value


@bp.route('', methods=['GET'])
@jwt_required()
def list_posts():
    """
    List the operator's posts.

    Query Parameters:
        - client_id (str, optional): Filter by client
        - status (str, optional): Filter by status (e.g. 'aguardando_aprovacao')
        - boost_requested (str, optional): 'true' to list open boost requests
        - order (str, optional): field name, '-' prefix for descending (default: -created_at)
    """
    criteria = {
        'client_id': request.args.get('client_id'),
        'status': request.args.get('status'),
    }
    if request.args.get('boost_requested', '').lower() == 'true':
        criteria['boost_requested'] = True

    posts = EntityRepository(Post, owner_id=get_jwt_identity()).filter(criteria, request.args.get('order'))
    return jsonify({"posts": [post.to_dict() for post in posts]}), 200


@bp.route('/calendar', methods=['GET'])
@jwt_required()
def calendar():
    """
    Posts scheduled between start and end (inclusive, YYYY-MM-DD).

    Example:
        GET /api/posts/calendar?start=2025-03-01&end=2025-03-31&client_id=xxx
    """
    try:
        start = _parse_day(request.args.get('start'), 'start')
        end = _parse_day(request.args.get('end'), 'end')
    except ValidationError as err:
        return jsonify({"error": "Validation failed", "details": err.messages}), 400

    posts = EntityRepository(Post, owner_id=get_jwt_identity()).filter({'client_id': request.args.get('client_id')})
    selected = post_service.posts_in_range(posts, start, end)
    return jsonify({"posts": [post.to_dict() for post in selected]}), 200


@bp.route('/board', methods=['GET'])
@jwt_required()
def board():
    """Kanban board: posts grouped by status column."""
    posts = EntityRepository(Post, owner_id=get_jwt_identity()).filter({'client_id': request.args.get('client_id')})
    columns = post_service.build_board(posts)
    return jsonify({
        "columns": list(post_service.BOARD_COLUMNS),
        "board": {status: [post.to_dict() for post in items] for status, items in columns.items()}
    }), 200


@bp.route('', methods=['POST'])
@jwt_required()
def create_post():
    data = request.get_json(silent=True) or {}
    try:
        validated = post_schema.load(data)
    except ValidationError as err:
        return jsonify({"error": "Validation failed", "details": err.messages}), 400

    validated.pop('version', None)
    post = post_service.create_post(get_jwt_identity(), validated)
    return jsonify({"post": post.to_dict()}), 201


@bp.route('/<post_id>', methods=['GET'])
@jwt_required()
def get_post(post_id):
    post = EntityRepository(Post, owner_id=get_jwt_identity()).get(post_id)
    if not post:
        current_app.logger.warning(f"Get post: Post not found post_id={post_id}")
        return jsonify({"error": "Post not found"}), 404
    return jsonify({"post": post.to_dict()}), 200


@bp.route('/<post_id>', methods=['PUT', 'PATCH'])
@jwt_required()
def update_post(post_id):
    """
    Update a post. Send the `version` you loaded to avoid overwriting
    someone else's changes (409 when it no longer matches).
    """
    data = request.get_json(silent=True) or {}
    try:
        validated = post_schema.load(data, partial=True)
    except ValidationError as err:
        return jsonify({"error": "Validation failed", "details": err.messages}), 400

    expected_version = validated.pop('version', None)
    post = post_service.update_post(get_jwt_identity(), post_id, validated, expected_version)
    return jsonify({"post": post.to_dict()}), 200


@bp.route('/<post_id>', methods=['DELETE'])
@jwt_required()
def delete_post(post_id):
    deleted = EntityRepository(Post, owner_id=get_jwt_identity()).delete(post_id)
    if not deleted:
        return jsonify({"error": "Post not found"}), 404
    current_app.logger.info(f"Delete post: Successfully deleted post_id={post_id}")
    return jsonify({"message": "Post deleted successfully"}), 200


@bp.route('/<post_id>/send-for-approval', methods=['POST'])
@jwt_required()
def send_for_approval(post_id):
    data = request.get_json(silent=True) or {}
    try:
        validated = version_schema.load(data)
    except ValidationError as err:
        return jsonify({"error": "Validation failed", "details": err.messages}), 400

    post = post_service.send_for_approval(get_jwt_identity(), post_id, validated.get('version'))
    return jsonify({"post": post.to_dict()}), 200


@bp.route('/<post_id>/move', methods=['POST'])
@jwt_required()
def move_post(post_id):
    """Kanban move: set any status, e.g. aprovado -> agendado -> postado."""
    data = request.get_json(silent=True) or {}
    try:
        validated = post_move_schema.load(data)
    except ValidationError as err:
        return jsonify({"error": "Validation failed", "details": err.messages}), 400

    post = post_service.move_post(get_jwt_identity(), post_id, validated['status'], validated.get('version'))
    return jsonify({"post": post.to_dict()}), 200


@bp.route('/<post_id>/boost-processed', methods=['POST'])
@jwt_required()
def boost_processed(post_id):
    post = post_service.mark_boost_processed(get_jwt_identity(), post_id)
    return jsonify({"post": post.to_dict()}), 200
