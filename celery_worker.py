"""
Celery entry point for running worker commands.

Usage:
    celery -A celery_worker worker --loglevel=info
"""
import logging

from agency import create_app
from agency.celery_app import celery_app

# Import tasks so the @celery_app.task decorators register them
from agency.tasks import notification_tasks  # noqa: F401

logger = logging.getLogger(__name__)

flask_app = create_app()

logger.info(f"Celery worker: registered tasks {sorted(name for name in celery_app.tasks if name.startswith('agency.'))}")

if __name__ == '__main__':
    celery_app.start()
