"""
Operator endpoints for managing issued approval links
"""
from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required, get_jwt_identity

from agency.services import approval_links

bp = Blueprint('approval_links', __name__)


@bp.route('/<link_id>', methods=['DELETE'])
@jwt_required()
def revoke_approval_link(link_id):
    """Delete a link. Revoking an unknown link still answers 200."""
    deleted = approval_links.revoke_link(link_id, get_jwt_identity())
    return jsonify({"message": "Approval link revoked", "deleted": deleted}), 200


@bp.route('/<link_id>/deactivate', methods=['POST'])
@jwt_required()
def deactivate_approval_link(link_id):
    link = approval_links.deactivate_link(link_id, get_jwt_identity())
    return jsonify({
        "approval_link": link.to_dict(share_url=approval_links.build_share_url(link.unique_token))
    }), 200
