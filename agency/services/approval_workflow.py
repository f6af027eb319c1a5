"""
Approval Workflow

What a client can do from a share link: list the posts waiting for their
approval, and approve, reject (with a reason) or ask to boost one of them.
Every action re-resolves the token, so an expired or revoked link stops
working immediately.

Approve and reject only apply to posts still awaiting approval; a second
reviewer acting on an already-decided post gets a ConflictError instead of
silently overwriting the first decision.
"""
import logging
from datetime import datetime
from typing import List, Optional, Tuple

from flask import current_app

from agency.errors import ConflictError, NotFoundError, ValidationFailedError
from agency.extensions import db
from agency.models.approval_link import ApprovalLink
from agency.models.client import Client
from agency.models.post import Post
from agency.models.user import User
from agency.services.approval_links import resolve_link
from agency.services.notifier import (
    ACTION_APPROVED,
    ACTION_BOOST,
    ACTION_REJECTED,
    build_notification,
)
from agency.services.repository import commit_session
from agency.tasks.notification_tasks import send_notification_task

logger = logging.getLogger(__name__)

AWAITING_APPROVAL = 'aguardando_aprovacao'


def get_pending_posts(token: str, now: Optional[datetime] = None) -> Tuple[Client, List[Post]]:
    """Client and its posts awaiting approval, newest first. Read-only."""
    link, client = resolve_link(token, now)
    posts = (
        Post.query
        .filter_by(client_id=client.client_id, status=AWAITING_APPROVAL)
        .order_by(Post.created_at.desc())
        .all()
    )
    logger.debug("Approval: listed pending posts", extra={
        "link_id": link.link_id,
        "client_id": client.client_id,
        "count": len(posts)
    })
    return client, posts


def approve_post(token: str, post_id: str, now: Optional[datetime] = None) -> Post:
    link, client = resolve_link(token, now)
    post = _load_post(client, post_id)
    _require_awaiting(post, 'approve')

    post.status = 'aprovado'
    commit_session('update', 'Post')
    logger.info("Approval: post approved", extra={"post_id": post.post_id, "client_id": client.client_id})

    _notify(link, client, post, ACTION_APPROVED)
    return post


def reject_post(token: str, post_id: str, reason: Optional[str], now: Optional[datetime] = None) -> Post:
    link, client = resolve_link(token, now)
    reason = reason.strip() if isinstance(reason, str) else ''
    if not reason:
        raise ValidationFailedError("Rejection reason is required", details={"reason": ["Rejection reason is required"]})

    post = _load_post(client, post_id)
    _require_awaiting(post, 'reject')

    post.status = 'rejeitado'
    post.rejection_reason = reason
    commit_session('update', 'Post')
    logger.info("Approval: post rejected", extra={"post_id": post.post_id, "client_id": client.client_id})

    _notify(link, client, post, ACTION_REJECTED, reason)
    return post


def request_boost(token: str, post_id: str, notes: Optional[str], now: Optional[datetime] = None) -> Post:
    """Flag a post for boosting. The post's status is left untouched."""
    link, client = resolve_link(token, now)
    notes = notes.strip() if isinstance(notes, str) else ''
    if not notes:
        raise ValidationFailedError("Boost notes are required", details={"notes": ["Boost notes are required"]})

    post = _load_post(client, post_id)
    post.boost_requested = True
    post.boost_notes = notes
    commit_session('update', 'Post')
    logger.info("Approval: boost requested", extra={"post_id": post.post_id, "client_id": client.client_id})

    _notify(link, client, post, ACTION_BOOST, notes)
    return post


def _load_post(client: Client, post_id: str) -> Post:
    # Lock the row so two reviewers cannot both pass the status check
    post = (
        Post.query
        .filter_by(post_id=post_id, client_id=client.client_id)
        .with_for_update()
        .first()
    )
    if not post:
        raise NotFoundError("Post not found")
    return post


def _require_awaiting(post: Post, action: str):
    if post.status != AWAITING_APPROVAL:
        status, post_id = post.status, post.post_id
        # Release the row lock before bailing out
        db.session.rollback()
        logger.warning(f"Approval: cannot {action} post in status {status}", extra={"post_id": post_id})
        raise ConflictError(
            f"Post is no longer awaiting approval (status: {status})",
            details={"status": status}
        )


def _notify(link: ApprovalLink, client: Client, post: Post, action: str, reason: Optional[str] = None):
    """Queue the operator notification; failures are logged, never raised."""
    owner = db.session.get(User, link.user_id)
    recipient = owner.email if owner and owner.email else current_app.config.get('NOTIFICATION_EMAIL')
    subject, body = build_notification(action, client.name, post.title, reason)

    try:
        send_notification_task.delay(recipient, subject, body)
    except Exception as e:
        logger.error(f"Approval: failed to queue notification: {e}", extra={
            "post_id": post.post_id,
            "action": action,
            "recipient": recipient
        })
