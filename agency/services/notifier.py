"""
Notification Service

Sends the operator a plain-text email whenever a client acts on an
approval link. Delivery goes through AWS SES; callers only get a success
flag back, failures are logged here and never raised.
"""
import logging
from typing import Optional, Dict, Any

import boto3
from botocore.exceptions import ClientError
from flask import current_app

logger = logging.getLogger(__name__)

# Subjects shown to the operator, keyed by workflow action
ACTION_APPROVED = "Post Aprovado"
ACTION_REJECTED = "Post Rejeitado"
ACTION_BOOST = "Pedido para Turbinar"

# Global SES client (initialized on first use)
_ses_client = None


class NotificationNotConfigured(Exception):
    pass


def get_ses_client():
    """Get or create AWS SES client."""
    global _ses_client

    if _ses_client is not None:
        return _ses_client

    config = current_app.config
    if not config.get('AWS_ACCESS_KEY_ID') or not config.get('AWS_SECRET_ACCESS_KEY'):
        raise NotificationNotConfigured("AWS credentials not configured. Set AWS_ACCESS_KEY_ID and AWS_SECRET_ACCESS_KEY in environment.")

    if not config.get('SES_SENDER_EMAIL'):
        raise NotificationNotConfigured("SES sender email not configured. Set SES_SENDER_EMAIL in environment.")

    _ses_client = boto3.client(
        'ses',
        aws_access_key_id=config['AWS_ACCESS_KEY_ID'],
        aws_secret_access_key=config['AWS_SECRET_ACCESS_KEY'],
        region_name=config.get('AWS_REGION', 'us-east-1')
    )
    logger.info("AWS SES client initialized", extra={"region": config.get('AWS_REGION')})
    return _ses_client


def send_email_via_ses(recipient_email: str, subject: str, body: str) -> Dict[str, Any]:
    """
    Send one plain-text email via AWS SES.

    Returns:
        Dict with 'success' and 'message_id' keys

    Raises:
        NotificationNotConfigured: SES credentials or sender missing
        ClientError / BotoCoreError: SES API call failed
    """
    ses_client = get_ses_client()
    response = ses_client.send_email(
        Source=current_app.config['SES_SENDER_EMAIL'],
        Destination={'ToAddresses': [recipient_email.strip()]},
        Message={
            'Subject': {'Data': subject, 'Charset': 'UTF-8'},
            'Body': {'Text': {'Data': body, 'Charset': 'UTF-8'}}
        }
    )
    return {'success': True, 'message_id': response.get('MessageId')}


def send_notification(to: Optional[str], subject: str, body: str) -> bool:
    """
    Deliver a notification, reporting success as a flag.

    Never raises: every failure is logged with the recipient and subject.
    """
    if not to or not to.strip():
        logger.error("Notification skipped: no recipient", extra={"subject": subject})
        return False

    try:
        result = send_email_via_ses(to, subject, body)
    except NotificationNotConfigured as e:
        logger.warning(f"Notification not sent, SES not configured: {e}", extra={
            "recipient": to,
            "subject": subject
        })
        return False
    except ClientError as e:
        error_code = e.response.get('Error', {}).get('Code', 'Unknown')
        logger.error("SES API error sending notification", extra={
            "error_code": error_code,
            "recipient": to,
            "subject": subject
        })
        return False
    except Exception as e:
        logger.exception("Unexpected error sending notification", extra={
            "recipient": to,
            "subject": subject,
            "error": str(e)
        })
        return False

    logger.info("Notification sent", extra={
        "recipient": to,
        "subject": subject,
        "message_id": result.get('message_id')
    })
    return True


def build_notification(action: str, client_name: str, post_title: str, reason: Optional[str] = None):
    """Return (subject, body) for a client action on a post."""
    subject = f"{action} - {post_title}"
    lines = [
        "Nova notificação!",
        "",
        f"Cliente: {client_name}",
        f"Post: {post_title}",
        f"Ação: {action}",
    ]
    if reason:
        lines.extend(["", f"Motivo: {reason}"])
    return subject, "\n".join(lines)
