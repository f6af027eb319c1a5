from flask_sqlalchemy import SQLAlchemy
from flask_jwt_extended import JWTManager
from flask_migrate import Migrate
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

"""
Flask Extensions - Initialized here, configured in agency/__init__.py

Kept apart from the app factory so models, services and tasks can import
them without importing the app itself.
"""
# Database ORM
# Usage: from agency.extensions import db

db = SQLAlchemy()

# JWT Authentication for operators
# Usage: from agency.extensions import jwt

jwt = JWTManager()

migrate = Migrate()

# Rate limiting for the public approval surface, keyed by client address
# Usage: @limiter.limit(...)

limiter = Limiter(key_func=get_remote_address)
