"""
Post Service

Operator-side post handling: keeping the media fields consistent with the
post format, sending posts for approval, moving them across the kanban
board and clearing boost requests.
"""
import logging
from typing import Any, Dict, List, Optional

from agency.errors import NotFoundError, ValidationFailedError
from agency.models.client import Client
from agency.models.post import MEDIA_FIELD_BY_FORMAT, POST_STATUSES, Post
from agency.services.repository import EntityRepository

logger = logging.getLogger(__name__)

MEDIA_FIELDS = ('image_url', 'video_url', 'carousel_images')

# Columns of the operator's kanban board, in display order
BOARD_COLUMNS = ('pendente', 'em_criacao', 'aguardando_aprovacao', 'aprovado', 'agendado', 'postado')


def _empty_media(field: str):
    return [] if field == 'carousel_images' else None


def normalize_media(data: Dict[str, Any], current: Optional[Post] = None) -> Dict[str, Any]:
    """
    Keep only the media field that matches the post format.

    Media sent for another format is rejected; media left over from a
    previous format is cleared.
    """
    post_format = data.get('format') or (current.format if current else 'post')
    keep = MEDIA_FIELD_BY_FORMAT[post_format]

    errors = {}
    for field in MEDIA_FIELDS:
        if field == keep:
            continue
        if data.get(field):
            errors[field] = [f"Not allowed for format '{post_format}', use {keep}"]
        data[field] = _empty_media(field)

    if keep in data and data[keep] is None:
        data[keep] = _empty_media(keep)

    if errors:
        raise ValidationFailedError("Validation failed", details=errors)
    return data


def _apply_status_side_effects(data: Dict[str, Any], current: Optional[Post] = None) -> Dict[str, Any]:
    """A rejection reason only survives while the post stays rejected."""
    status = data.get('status') or (current.status if current else 'pendente')
    if status != 'rejeitado':
        data['rejection_reason'] = None
    return data


def create_post(user_id: str, data: Dict[str, Any]) -> Post:
    client = Client.query.filter_by(client_id=data.get('client_id'), user_id=user_id).first()
    if not client:
        raise NotFoundError("Client not found")

    data = _apply_status_side_effects(normalize_media(dict(data)))
    post = EntityRepository(Post, owner_id=user_id).create(data)
    logger.info("Post created", extra={"post_id": post.post_id, "client_id": post.client_id, "status": post.status})
    return post


def update_post(user_id: str, post_id: str, data: Dict[str, Any], expected_version: Optional[int] = None) -> Post:
    repo = EntityRepository(Post, owner_id=user_id)
    post = repo.get(post_id)
    if not post:
        raise NotFoundError("Post not found")

    if 'client_id' in data and data['client_id'] != post.client_id:
        if not Client.query.filter_by(client_id=data['client_id'], user_id=user_id).first():
            raise NotFoundError("Client not found")

    data = _apply_status_side_effects(normalize_media(dict(data), current=post), current=post)
    return repo.update(post_id, data, expected_version=expected_version)


def send_for_approval(user_id: str, post_id: str, expected_version: Optional[int] = None) -> Post:
    """Put a post in front of the client, whatever its current status."""
    repo = EntityRepository(Post, owner_id=user_id)
    post = repo.get(post_id)
    if not post:
        raise NotFoundError("Post not found")

    if not post.has_media():
        raise ValidationFailedError(
            "Post has no media to review",
            details={post.media_field: [f"Required before sending a '{post.format}' for approval"]}
        )

    post = repo.update(post_id, {'status': 'aguardando_aprovacao', 'rejection_reason': None},
                       expected_version=expected_version)
    logger.info("Post sent for approval", extra={"post_id": post_id, "client_id": post.client_id})
    return post


def move_post(user_id: str, post_id: str, status: str, expected_version: Optional[int] = None) -> Post:
    """Free-form status change from the kanban board."""
    if status not in POST_STATUSES:
        raise ValidationFailedError("Validation failed", details={"status": [f"Must be one of: {', '.join(POST_STATUSES)}"]})

    post = EntityRepository(Post, owner_id=user_id).update(
        post_id, _apply_status_side_effects({'status': status}), expected_version=expected_version
    )
    if post is None:
        raise NotFoundError("Post not found")
    logger.info("Post moved", extra={"post_id": post_id, "status": status})
    return post


def mark_boost_processed(user_id: str, post_id: str) -> Post:
    """Clear the boost flag; the client's notes stay on the post."""
    post = EntityRepository(Post, owner_id=user_id).update(post_id, {'boost_requested': False})
    if post is None:
        raise NotFoundError("Post not found")
    logger.info("Boost request processed", extra={"post_id": post_id})
    return post


def build_board(posts: List[Post]) -> Dict[str, List[Post]]:
    """Group posts by board column; rejected posts get a group of their own."""
    board = {column: [] for column in BOARD_COLUMNS}
    board['rejeitado'] = []
    for post in posts:
        board.setdefault(post.status, []).append(post)
    return board


def posts_in_range(posts: List[Post], start: Optional[str], end: Optional[str]) -> List[Post]:
    """
    Posts whose scheduled day falls within [start, end] (YYYY-MM-DD).

    Only the date part of the stored wall-clock string is compared, so no
    timezone ever shifts a post to another day.
    """
    selected = []
    for post in posts:
        if not post.scheduled_date:
            continue
        day = post.scheduled_date[:10]
        if start and day < start:
            continue
        if end and day > end:
            continue
        selected.append(post)
    return sorted(selected, key=lambda p: p.scheduled_date)
