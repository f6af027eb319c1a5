"""
API endpoints for client payments
"""
from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required, get_jwt_identity
from marshmallow import ValidationError

from agency.models.client import Client
from agency.models.payment import Payment
from agency.schemas.payment_schema import PaymentSchema
from agency.services.payments import sort_payments
from agency.services.repository import EntityRepository

bp = Blueprint('payments', __name__)

payment_schema = PaymentSchema()


@bp.route('', methods=['GET'])
@jwt_required()
def list_payments():
    """
    List payments, newest billing period first.

    Query Parameters:
        - client_id (str, optional)
        - status (str, optional): recebido | pendente | atrasado
    """
    payments = EntityRepository(Payment, owner_id=get_jwt_identity()).filter({
        'client_id': request.args.get('client_id'),
        'status': request.args.get('status'),
    })
    return jsonify({"payments": [payment.to_dict() for payment in sort_payments(payments)]}), 200


@bp.route('', methods=['POST'])
@jwt_required()
def create_payment():
    user_id = get_jwt_identity()
    data = request.get_json(silent=True) or {}
    try:
        validated = payment_schema.load(data)
    except ValidationError as err:
        return jsonify({"error": "Validation failed", "details": err.messages}), 400

    if not EntityRepository(Client, owner_id=user_id).get(validated['client_id']):
        return jsonify({"error": "Client not found"}), 404

    payment = EntityRepository(Payment, owner_id=user_id).create(validated)
    return jsonify({"payment": payment.to_dict()}), 201


@bp.route('/<payment_id>', methods=['PUT', 'PATCH'])
@jwt_required()
def update_payment(payment_id):
    data = request.get_json(silent=True) or {}
    try:
        validated = payment_schema.load(data, partial=True)
    except ValidationError as err:
        return jsonify({"error": "Validation failed", "details": err.messages}), 400

    # Payments stay with the client they were recorded for
    validated.pop('client_id', None)
    payment = EntityRepository(Payment, owner_id=get_jwt_identity()).update(payment_id, validated)
    if not payment:
        return jsonify({"error": "Payment not found"}), 404
    return jsonify({"payment": payment.to_dict()}), 200


@bp.route('/<payment_id>', methods=['DELETE'])
@jwt_required()
def delete_payment(payment_id):
    if not EntityRepository(Payment, owner_id=get_jwt_identity()).delete(payment_id):
        return jsonify({"error": "Payment not found"}), 404
    return jsonify({"message": "Payment deleted successfully"}), 200
