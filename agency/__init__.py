from flask import Flask, jsonify
from flask_cors import CORS
from marshmallow import ValidationError
from agency.config import Config
from agency.errors import AgencyError
from agency.extensions import db, jwt, migrate, limiter
from agency.celery_app import init_celery


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    db.init_app(app)
    jwt.init_app(app)
    migrate.init_app(app, db)
    limiter.init_app(app)
    CORS(app)

    # Health check endpoint - register early so it's always available
    @app.route('/api/health', methods=['GET'])
    def health():
        return jsonify({"status": "ok"}), 200

    # Import models so they are registered with SQLAlchemy
    from agency.models import (  # noqa: F401
        User,
        TokenBlocklist,
        Client,
        Post,
        ApprovalLink,
        Payment,
        PersonalEvent,
        Idea,
        Task,
    )

    # Register blueprints
    from agency.api import auth
    app.register_blueprint(auth.bp, url_prefix='/api/auth')
    from agency.api import clients
    app.register_blueprint(clients.bp, url_prefix='/api/clients')
    from agency.api import posts
    app.register_blueprint(posts.bp, url_prefix='/api/posts')
    from agency.api import approval_links
    app.register_blueprint(approval_links.bp, url_prefix='/api/approval-links')
    from agency.api import approval
    app.register_blueprint(approval.bp, url_prefix='/api/approval')
    from agency.api import payments
    app.register_blueprint(payments.bp, url_prefix='/api/payments')
    from agency.api import personal
    app.register_blueprint(personal.events_bp, url_prefix='/api/personal-events')
    app.register_blueprint(personal.ideas_bp, url_prefix='/api/ideas')
    app.register_blueprint(personal.tasks_bp, url_prefix='/api/tasks')
    from agency.api import dashboard
    app.register_blueprint(dashboard.bp, url_prefix='/api/dashboard')
    from agency.api import uploads
    app.register_blueprint(uploads.bp, url_prefix='/api/uploads')

    # Structured errors raised by services
    @app.errorhandler(AgencyError)
    def handle_agency_error(err):
        if err.status_code >= 500:
            app.logger.error(f"{type(err).__name__}: {err.message}")
        return jsonify(err.to_dict()), err.status_code

    @app.errorhandler(ValidationError)
    def handle_validation_error(err):
        return jsonify({"error": "Validation failed", "details": err.messages}), 400

    @app.errorhandler(413)
    def handle_too_large(err):
        limit = app.config.get('MAX_UPLOAD_BYTES')
        return jsonify({"error": f"Request too large (max upload {limit} bytes)"}), 413

    @app.errorhandler(429)
    def handle_rate_limited(err):
        return jsonify({"error": "Too many requests", "details": str(err.description)}), 429

    # JWT error handlers for clearer responses
    @jwt.unauthorized_loader
    def jwt_missing_token(err):
        return jsonify({"error": "Unauthorized", "details": err}), 401

    @jwt.invalid_token_loader
    def jwt_invalid_token(err):
        return jsonify({"error": "Invalid token", "details": err}), 401

    @jwt.expired_token_loader
    def jwt_expired_token(header, payload):
        return jsonify({"error": "Token expired"}), 401

    @jwt.revoked_token_loader
    def jwt_revoked_token(header, payload):
        return jsonify({"error": "Token revoked"}), 401

    @jwt.token_in_blocklist_loader
    def check_if_token_revoked(header, payload):
        return db.session.get(TokenBlocklist, payload['jti']) is not None

    init_celery(app)

    return app
