from agency.models.user import User
from agency.models.token_blocklist import TokenBlocklist
from agency.models.client import Client
from agency.models.post import Post
from agency.models.approval_link import ApprovalLink
from agency.models.payment import Payment
from agency.models.personal import PersonalEvent, Idea, Task

__all__ = [
    'User',
    'TokenBlocklist',
    'Client',
    'Post',
    'ApprovalLink',
    'Payment',
    'PersonalEvent',
    'Idea',
    'Task',
]
