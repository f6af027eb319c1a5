"""
Approval Link Service

Issues, resolves and revokes the share tokens that let a client review
their posts without an account. The token is the only credential on the
approval surface, so every check happens here on the server.
"""
import logging
import secrets
from datetime import datetime, timedelta
from typing import List, Optional, Tuple
from urllib.parse import urlencode

from flask import current_app

from agency.errors import ExpiredError, NotFoundError
from agency.extensions import db
from agency.models.approval_link import ApprovalLink
from agency.models.client import Client
from agency.services.repository import EntityRepository, commit_session

logger = logging.getLogger(__name__)

# 32 random bytes -> 256 bits of entropy, 43 URL-safe characters
TOKEN_BYTES = 32


def generate_token() -> str:
    return secrets.token_urlsafe(TOKEN_BYTES)


def token_hint(token: Optional[str]) -> str:
    """Loggable prefix of a bearer token."""
    return f"{token[:6]}..." if token else "<empty>"


def build_share_url(token: str) -> str:
    origin = current_app.config.get('APP_ORIGIN', '').rstrip('/')
    return f"{origin}/approval?{urlencode({'token': token})}"


def link_ttl() -> timedelta:
    return timedelta(days=current_app.config.get('APPROVAL_LINK_TTL_DAYS', 30))


def issue_link(client_id: str, user_id: str, now: Optional[datetime] = None) -> ApprovalLink:
    """
    Create a fresh approval link for one of the operator's clients.

    Raises:
        NotFoundError: client does not exist or belongs to another operator
    """
    client = Client.query.filter_by(client_id=client_id, user_id=user_id).first()
    if not client:
        raise NotFoundError("Client not found")

    now = now or datetime.utcnow()
    link = ApprovalLink(
        user_id=user_id,
        client_id=client_id,
        unique_token=generate_token(),
        expires_at=now + link_ttl(),
        is_active=True,
        created_at=now,
    )
    db.session.add(link)
    commit_session('create', 'ApprovalLink')

    logger.info("Approval link issued", extra={
        "link_id": link.link_id,
        "client_id": client_id,
        "expires_at": link.expires_at.isoformat()
    })
    return link


def resolve_link(token: Optional[str], now: Optional[datetime] = None) -> Tuple[ApprovalLink, Client]:
    """
    Look up the link behind a token and the client it belongs to.

    Raises:
        NotFoundError: no link has this token, or its client no longer exists
        ExpiredError: link expired (now >= expires_at) or deactivated
    """
    if not token:
        raise NotFoundError("Approval link not found")

    link = ApprovalLink.query.filter_by(unique_token=token).first()
    if not link:
        logger.warning("Approval link not found", extra={"token": token_hint(token)})
        raise NotFoundError("Approval link not found")

    if not link.grants_access(now):
        logger.info("Approval link expired or inactive", extra={
            "link_id": link.link_id,
            "is_active": link.is_active,
            "expires_at": link.expires_at.isoformat()
        })
        raise ExpiredError("This approval link has expired")

    client = db.session.get(Client, link.client_id)
    if not client:
        logger.error("Approval link points at a missing client", extra={
            "link_id": link.link_id,
            "client_id": link.client_id
        })
        raise NotFoundError("Client not found")

    return link, client


def revoke_link(link_id: str, user_id: str) -> bool:
    """Delete a link. Deleting an unknown id is not an error."""
    deleted = EntityRepository(ApprovalLink, owner_id=user_id).delete(link_id)
    if deleted:
        logger.info("Approval link revoked", extra={"link_id": link_id})
    return deleted


def deactivate_link(link_id: str, user_id: str) -> ApprovalLink:
    """Switch a link off while keeping it in the client's history."""
    link = EntityRepository(ApprovalLink, owner_id=user_id).update(link_id, {'is_active': False})
    if link is None:
        raise NotFoundError("Approval link not found")
    logger.info("Approval link deactivated", extra={"link_id": link_id})
    return link


def list_links(client_id: str, user_id: str) -> List[ApprovalLink]:
    return EntityRepository(ApprovalLink, owner_id=user_id).filter({'client_id': client_id}, '-created_at')
