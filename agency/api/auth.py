from flask import Blueprint, request, jsonify, current_app
from marshmallow import ValidationError
from werkzeug.security import generate_password_hash, check_password_hash
from flask_jwt_extended import (
    create_access_token,
    create_refresh_token,
    jwt_required,
    get_jwt,
    get_jwt_identity,
)
from agency.extensions import db
from agency.models.user import User
from agency.models.token_blocklist import TokenBlocklist
from agency.schemas.auth_schema import RegisterSchema, LoginSchema
from agency.services.repository import commit_session

# Create Blueprint
bp = Blueprint('auth', __name__)

# Initialize schemas
register_schema = RegisterSchema()
login_schema = LoginSchema()


def _issue_tokens(user):
    access_token = create_access_token(
        identity=user.user_id,
        additional_claims={"email": user.email, "name": user.name}
    )
    refresh_token = create_refresh_token(identity=user.user_id)
    return access_token, refresh_token


@bp.route('/register', methods=['POST'])
def register():
    """
    Operator Registration Endpoint

    Request Body:
        {
            "name": "Mariana",
            "email": "mari@studio.com",
            "password": "Secure#Pass1"
        }

    Returns:
        201: Registration successful with JWT tokens
        400: Validation error or email already exists
    """
    data = request.get_json(silent=True) or {}

    try:
        validated_data = register_schema.load(data)
    except ValidationError as err:
        return jsonify({"error": "Validation failed", "details": err.messages}), 400

    email = validated_data['email'].strip().lower()

    existing_user = User.query.filter_by(email=email).first()
    if existing_user:
        return jsonify({"error": "Email already registered"}), 400

    user = User(
        name=validated_data['name'].strip(),
        email=email,
        password_hash=generate_password_hash(validated_data['password']),
        is_active=True
    )
    db.session.add(user)
    commit_session('create', 'User')

    current_app.logger.info(f"Auth: registered user_id={user.user_id}")

    access_token, refresh_token = _issue_tokens(user)
    return jsonify({
        "message": "Registration successful",
        "user": user.to_dict(),
        "access_token": access_token,
        "refresh_token": refresh_token
    }), 201


@bp.route('/login', methods=['POST'])
def login():
    """
    Login Endpoint

    Responses:
      200 Login successful
      400 Missing or malformed email/password
      401 Wrong credentials or inactive account
    """
    data = request.get_json(silent=True) or {}

    try:
        validated_data = login_schema.load(data)
    except ValidationError as err:
        return jsonify({"error": "Validation failed", "details": err.messages}), 400

    user = User.query.filter_by(email=validated_data['email'].strip().lower()).first()

    # Same answer for unknown email and wrong password
    if not user or not check_password_hash(user.password_hash, validated_data['password']):
        current_app.logger.warning("Auth: failed login attempt")
        return jsonify({"error": "Invalid credentials"}), 401

    if not user.is_active:
        return jsonify({"error": "Account disabled"}), 401

    access_token, refresh_token = _issue_tokens(user)
    return jsonify({
        "message": "Login successful",
        "user": user.to_dict(),
        "access_token": access_token,
        "refresh_token": refresh_token
    }), 200


@bp.route('/refresh', methods=['POST'])
@jwt_required(refresh=True)
def refresh():
    """
    Refresh Token Endpoint
    - Requires a valid refresh token
    - Returns a new access token
    """
    user = db.session.get(User, get_jwt_identity())
    if not user or not user.is_active:
        return jsonify({"error": "User not found"}), 404

    access_token, _ = _issue_tokens(user)
    return jsonify({"access_token": access_token}), 200


@bp.route('/logout', methods=['POST'])
@jwt_required(verify_type=False)
def logout():
    """Revoke the token used for this request (access or refresh)."""
    jwt_payload = get_jwt()
    db.session.add(TokenBlocklist(jti=jwt_payload['jti'], user_id=get_jwt_identity()))
    commit_session('create', 'TokenBlocklist')
    return jsonify({"message": "Logged out"}), 200


@bp.route('/me', methods=['GET'])
@jwt_required()
def me():
    """Return current logged-in user's info."""
    user = db.session.get(User, get_jwt_identity())
    if not user:
        return jsonify({"error": "User not found"}), 404

    return jsonify({"user": user.to_dict()}), 200
