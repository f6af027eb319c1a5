import os
from dotenv import load_dotenv
from datetime import timedelta

load_dotenv()


UPLOAD_ENVELOPE_BYTES = 64 * 1024


def _env_flag(name, default='false'):
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    # Database - Render provides this as DATABASE_URL; SQLite for local runs
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL', 'sqlite:///agency.db')

    # Fix for Render's postgres:// vs postgresql://
    if SQLALCHEMY_DATABASE_URI and SQLALCHEMY_DATABASE_URI.startswith('postgres://'):
        SQLALCHEMY_DATABASE_URI = SQLALCHEMY_DATABASE_URI.replace('postgres://', 'postgresql://', 1)

    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SECRET_KEY = os.getenv('SECRET_KEY')
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY')
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=24)
    JWT_REFRESH_TOKEN_EXPIRES = timedelta(days=30)

    # Redis / Celery
    REDIS_URL = os.getenv('REDIS_URL', 'redis://localhost:6379/0')
    CELERY_BROKER_URL = os.getenv('CELERY_BROKER_URL', REDIS_URL)
    CELERY_RESULT_BACKEND = os.getenv('CELERY_RESULT_BACKEND', REDIS_URL)
    CELERY_TASK_ALWAYS_EAGER = _env_flag('CELERY_TASK_ALWAYS_EAGER')

    # AWS SES Configuration (approval notifications)
    AWS_ACCESS_KEY_ID = os.getenv('AWS_ACCESS_KEY_ID')
    AWS_SECRET_ACCESS_KEY = os.getenv('AWS_SECRET_ACCESS_KEY')
    AWS_REGION = os.getenv('AWS_REGION', 'us-east-1')
    SES_SENDER_EMAIL = os.getenv('SES_SENDER_EMAIL')
    # Used when the owning operator has no email on record
    NOTIFICATION_EMAIL = os.getenv('NOTIFICATION_EMAIL')

    # Approval links
    APP_ORIGIN = os.getenv('APP_ORIGIN', 'http://localhost:5173')
    APPROVAL_LINK_TTL_DAYS = int(os.getenv('APPROVAL_LINK_TTL_DAYS', '30'))

    # Rate limiting (public approval endpoints only)
    RATELIMIT_ENABLED = _env_flag('RATELIMIT_ENABLED', 'true')
    RATELIMIT_STORAGE_URI = os.getenv('RATELIMIT_STORAGE_URI', 'memory://')
    APPROVAL_RATE_LIMIT = os.getenv('APPROVAL_RATE_LIMIT', '60 per minute')

    # Uploads are returned inline as data URLs, so keep them small
    MAX_UPLOAD_BYTES = int(os.getenv('MAX_UPLOAD_BYTES', str(10 * 1024 * 1024)))
    # Whole request cap, leaving room for the multipart envelope around the file
    MAX_CONTENT_LENGTH = MAX_UPLOAD_BYTES + UPLOAD_ENVELOPE_BYTES


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SECRET_KEY = 'test-secret'
    JWT_SECRET_KEY = 'test-jwt-secret-key-with-enough-length'
    CELERY_BROKER_URL = 'memory://'
    CELERY_RESULT_BACKEND = 'cache+memory://'
    CELERY_TASK_ALWAYS_EAGER = True
    RATELIMIT_ENABLED = False
    APP_ORIGIN = 'https://agency.test'
    NOTIFICATION_EMAIL = 'studio@agency.test'
    MAX_UPLOAD_BYTES = 1024
    MAX_CONTENT_LENGTH = MAX_UPLOAD_BYTES + UPLOAD_ENVELOPE_BYTES
