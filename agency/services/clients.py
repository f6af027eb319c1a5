"""
Client Service

Deleting a client takes its posts, payments and approval links with it.
All of it happens in one transaction: either everything is gone or
nothing changed.
"""
import logging

from agency.extensions import db
from agency.models.client import Client
from agency.services.approval_links import build_share_url
from agency.services.payments import sort_payments
from agency.services.repository import commit_session

logger = logging.getLogger(__name__)


def delete_client(client_id: str, user_id: str) -> bool:
    """
    Delete a client and everything it owns.

    Ideas filed under the client are kept, detached from it.

    Returns:
        False when the client does not exist for this operator
    """
    client = Client.query.filter_by(client_id=client_id, user_id=user_id).first()
    if not client:
        return False

    counts = {
        "posts_deleted": len(client.posts),
        "payments_deleted": len(client.payments),
        "links_deleted": len(client.approval_links),
    }

    # Relationship cascades delete posts, payments and links in this flush
    db.session.delete(client)
    commit_session('delete', 'Client')

    logger.info("Client deleted with dependents", extra={"client_id": client_id, **counts})
    return True


def client_profile(client: Client) -> dict:
    """Client with its posts (newest first), payments and approval links."""
    posts = sorted(client.posts, key=lambda p: p.created_at, reverse=True)
    links = sorted(client.approval_links, key=lambda link: link.created_at, reverse=True)
    return {
        "client": client.to_dict(),
        "posts": [post.to_dict() for post in posts],
        "payments": [payment.to_dict() for payment in sort_payments(client.payments)],
        "approval_links": [link.to_dict(share_url=build_share_url(link.unique_token)) for link in links],
    }
