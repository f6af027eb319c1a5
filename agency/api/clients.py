"""
API endpoints for agency clients
"""
from flask import Blueprint, request, jsonify, current_app
from flask_jwt_extended import jwt_required, get_jwt_identity
from marshmallow import ValidationError

from agency.models.client import Client
from agency.schemas.client_schema import ClientSchema
from agency.services import approval_links
from agency.services.clients import client_profile, delete_client
from agency.services.repository import EntityRepository

bp = Blueprint('clients', __name__)

client_schema = ClientSchema()


@bp.route('', methods=['GET'])
@jwt_required()
def list_clients():
    """
    List the operator's clients.

    Query Parameters:
        - payment_status (str, optional): recebido | pendente | atrasado
        - order (str, optional): field name, '-' prefix for descending (default: name)
    """
    repo = EntityRepository(Client, owner_id=get_jwt_identity(), default_order='name')
    clients = repo.filter(
        {'payment_status': request.args.get('payment_status')},
        request.args.get('order')
    )
    return jsonify({"clients": [client.to_dict() for client in clients]}), 200


@bp.route('', methods=['POST'])
@jwt_required()
def create_client():
    data = request.get_json(silent=True) or {}
    try:
        validated = client_schema.load(data)
    except ValidationError as err:
        return jsonify({"error": "Validation failed", "details": err.messages}), 400

    client = EntityRepository(Client, owner_id=get_jwt_identity()).create(validated)
    current_app.logger.info(f"Clients: created client_id={client.client_id}")
    return jsonify({"client": client.to_dict()}), 201


@bp.route('/<client_id>', methods=['GET'])
@jwt_required()
def get_client(client_id):
    """Client profile: the client plus its posts, payments and approval links."""
    client = EntityRepository(Client, owner_id=get_jwt_identity()).get(client_id)
    if not client:
        return jsonify({"error": "Client not found"}), 404
    return jsonify(client_profile(client)), 200


@bp.route('/<client_id>', methods=['PUT', 'PATCH'])
@jwt_required()
def update_client(client_id):
    data = request.get_json(silent=True) or {}
    try:
        validated = client_schema.load(data, partial=True)
    except ValidationError as err:
        return jsonify({"error": "Validation failed", "details": err.messages}), 400

    client = EntityRepository(Client, owner_id=get_jwt_identity()).update(client_id, validated)
    if not client:
        return jsonify({"error": "Client not found"}), 404
    return jsonify({"client": client.to_dict()}), 200


@bp.route('/<client_id>', methods=['DELETE'])
@jwt_required()
def remove_client(client_id):
    """
    Delete a client together with its posts, payments and approval links.

    Returns:
    - 200: Client and dependents deleted
    - 404: Client not found
    """
    user_id = get_jwt_identity()
    current_app.logger.debug(f"Delete client: Request for client_id={client_id}, user_id={user_id}")

    if not delete_client(client_id, user_id):
        current_app.logger.warning(f"Delete client: Client not found client_id={client_id}")
        return jsonify({"error": "Client not found"}), 404

    return jsonify({"message": "Client deleted successfully"}), 200


@bp.route('/<client_id>/approval-links', methods=['GET'])
@jwt_required()
def list_approval_links(client_id):
    links = approval_links.list_links(client_id, get_jwt_identity())
    return jsonify({
        "approval_links": [
            link.to_dict(share_url=approval_links.build_share_url(link.unique_token)) for link in links
        ]
    }), 200


@bp.route('/<client_id>/approval-links', methods=['POST'])
@jwt_required()
def issue_approval_link(client_id):
    """
    Issue a new approval link for the client.

    Returns the link with a ready-to-share URL:
        {"approval_link": {"unique_token": "...", "share_url": "<origin>/approval?token=...", ...}}
    """
    link = approval_links.issue_link(client_id, get_jwt_identity())
    return jsonify({
        "approval_link": link.to_dict(share_url=approval_links.build_share_url(link.unique_token))
    }), 201
