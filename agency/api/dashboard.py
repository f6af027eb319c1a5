from datetime import datetime
from flask import Blueprint, jsonify, current_app
from flask_jwt_extended import jwt_required, get_jwt_identity

from agency.models.client import Client
from agency.models.post import Post

bp = Blueprint('dashboard', __name__)


@bp.route('/stats', methods=['GET'])
@jwt_required()
def get_dashboard_stats():
    """
    Dashboard Statistics Endpoint

    Returns aggregated statistics for the current operator:
    - Total clients
    - Posts awaiting client approval
    - Approved posts
    - Open boost requests
    - Clients with overdue payments
    - Posts scheduled for today
    """
    user_id = get_jwt_identity()
    current_app.logger.debug("Dashboard: Fetching stats for user_id=%s", user_id)

    total_clients = Client.query.filter_by(user_id=user_id).count()

    pending_approval = Post.query.filter_by(user_id=user_id, status='aguardando_aprovacao').count()

    approved_posts = Post.query.filter_by(user_id=user_id, status='aprovado').count()

    boost_requests = (
        Post.query
        .filter_by(user_id=user_id, boost_requested=True)
        .order_by(Post.updated_at.desc())
        .all()
    )

    overdue_clients = (
        Client.query
        .filter_by(user_id=user_id, payment_status='atrasado')
        .order_by(Client.name)
        .all()
    )

    # scheduled_date is a local wall-clock string, compare by its day prefix
    today = datetime.now().strftime('%Y-%m-%d')
    todays_posts = (
        Post.query
        .filter(Post.user_id == user_id, Post.scheduled_date.like(f"{today}%"))
        .order_by(Post.scheduled_date)
        .all()
    )

    stats = {
        "total_clients": total_clients,
        "pending_approval": pending_approval,
        "approved_posts": approved_posts,
        "boost_requests": [post.to_dict() for post in boost_requests],
        "overdue_clients": [
            {"client_id": client.client_id, "name": client.name} for client in overdue_clients
        ],
        "todays_posts": [post.to_dict() for post in todays_posts],
    }

    current_app.logger.info("Dashboard: Stats successfully retrieved for user_id=%s", user_id)
    return jsonify({"stats": stats}), 200
