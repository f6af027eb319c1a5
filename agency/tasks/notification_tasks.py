"""
Celery tasks for approval notifications.
"""
import logging
from typing import Dict, Any

from agency.celery_app import celery_app
from agency.services.notifier import send_notification

logger = logging.getLogger(__name__)


@celery_app.task(name='agency.send_notification')
def send_notification_task(recipient: str, subject: str, body: str) -> Dict[str, Any]:
    """
    Send one approval notification.

    The task never fails: delivery problems are logged by the notifier and
    reported in the result so the worker log shows them.
    """
    success = send_notification(recipient, subject, body)
    if not success:
        logger.warning("Notification task finished without delivery", extra={
            "recipient": recipient,
            "subject": subject
        })
    return {"success": success, "recipient": recipient, "subject": subject}
