import sys
from pathlib import Path

import pytest

# Make the repository root importable so `import agency` works without an install.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from agency import create_app  # noqa: E402
from agency.config import TestingConfig  # noqa: E402
from agency.extensions import db  # noqa: E402
from agency.services import notifier  # noqa: E402

OPERATOR = {"name": "Mariana", "email": "mari@studio.com", "password": "Secure#Pass1"}


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def api(app):
    return app.test_client()


@pytest.fixture(autouse=True)
def sent_emails(monkeypatch):
    """Capture outgoing notification emails instead of calling SES."""
    sent = []

    def fake_send(recipient_email, subject, body):
        sent.append({"to": recipient_email, "subject": subject, "body": body})
        return {"success": True, "message_id": f"test-{len(sent)}"}

    monkeypatch.setattr(notifier, "send_email_via_ses", fake_send)
    return sent


@pytest.fixture
def register(api):
    def _register(**overrides):
        payload = {**OPERATOR, **overrides}
        resp = api.post('/api/auth/register', json=payload)
        assert resp.status_code == 201, resp.get_json()
        body = resp.get_json()
        return {"Authorization": f"Bearer {body['access_token']}"}, body['user']
    return _register


@pytest.fixture
def operator(register):
    """Registered operator: (headers, user)."""
    return register()


@pytest.fixture
def auth_headers(operator):
    return operator[0]


@pytest.fixture
def make_client(api, auth_headers):
    def _make(headers=None, **fields):
        payload = {"name": "Padaria Central", "monthly_fee": 800, **fields}
        resp = api.post('/api/clients', json=payload, headers=headers or auth_headers)
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()['client']
    return _make


@pytest.fixture
def make_post(api, auth_headers):
    def _make(client_id, headers=None, **fields):
        payload = {
            "client_id": client_id,
            "title": "Cardápio do dia",
            "caption": "Pão de queijo saindo do forno",
            "format": "post",
            "image_url": "https://cdn.agency.test/cardapio.png",
            "scheduled_date": "2025-03-01T09:30",
            "status": "aguardando_aprovacao",
            **fields,
        }
        resp = api.post('/api/posts', json=payload, headers=headers or auth_headers)
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()['post']
    return _make


@pytest.fixture
def make_link(api, auth_headers):
    def _make(client_id, headers=None):
        resp = api.post(f'/api/clients/{client_id}/approval-links', headers=headers or auth_headers)
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()['approval_link']
    return _make
