from datetime import datetime, timedelta

import pytest

from agency.errors import ExpiredError, NotFoundError
from agency.extensions import db
from agency.models.approval_link import ApprovalLink
from agency.services import approval_links


def test_issued_link_has_share_url_and_thirty_day_expiry(api, make_client, make_link):
    client = make_client()
    before = datetime.utcnow()
    link = make_link(client['client_id'])

    assert link['is_active'] is True
    assert link['share_url'] == f"https://agency.test/approval?token={link['unique_token']}"
    expires_at = datetime.fromisoformat(link['expires_at'])
    assert before + timedelta(days=30) <= expires_at <= datetime.utcnow() + timedelta(days=30)


def test_tokens_are_long_and_unique(app):
    tokens = {approval_links.generate_token() for _ in range(50)}
    assert len(tokens) == 50
    assert all(len(token) >= 43 for token in tokens)


def test_issue_link_for_unknown_client_is_404(api, auth_headers):
    resp = api.post('/api/clients/does-not-exist/approval-links', headers=auth_headers)
    assert resp.status_code == 404


def test_issue_link_for_another_operators_client_is_404(api, register, make_client):
    client = make_client()
    other_headers, _ = register(email='outra@studio.com')
    resp = api.post(f"/api/clients/{client['client_id']}/approval-links", headers=other_headers)
    assert resp.status_code == 404


def test_resolve_unknown_token_raises_not_found(app):
    with app.app_context():
        with pytest.raises(NotFoundError):
            approval_links.resolve_link('no-such-token')
        with pytest.raises(NotFoundError):
            approval_links.resolve_link('')


def test_link_expires_exactly_at_expiry(app, operator, make_client):
    _, user = operator
    client = make_client()
    issued_at = datetime(2025, 3, 1, 12, 0, 0)

    with app.app_context():
        link = approval_links.issue_link(client['client_id'], user['user_id'], now=issued_at)
        token = link.unique_token
        assert link.expires_at == issued_at + timedelta(days=30)

        resolved, owner = approval_links.resolve_link(token, now=issued_at + timedelta(days=30, seconds=-1))
        assert resolved.link_id == link.link_id
        assert owner.client_id == client['client_id']

        with pytest.raises(ExpiredError):
            approval_links.resolve_link(token, now=issued_at + timedelta(days=30))


def test_expired_link_answers_410(api, app, make_client, make_link):
    client = make_client()
    link = make_link(client['client_id'])

    with app.app_context():
        record = db.session.get(ApprovalLink, link['link_id'])
        record.expires_at = datetime.utcnow() - timedelta(seconds=1)
        db.session.commit()

    resp = api.get(f"/api/approval?token={link['unique_token']}")
    assert resp.status_code == 410


def test_deactivated_link_answers_410(api, auth_headers, make_client, make_link):
    client = make_client()
    link = make_link(client['client_id'])

    resp = api.post(f"/api/approval-links/{link['link_id']}/deactivate", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.get_json()['approval_link']['is_active'] is False

    resp = api.get(f"/api/approval?token={link['unique_token']}")
    assert resp.status_code == 410


def test_deactivate_unknown_link_is_404(api, auth_headers):
    resp = api.post('/api/approval-links/missing/deactivate', headers=auth_headers)
    assert resp.status_code == 404


def test_revoke_is_idempotent(api, auth_headers, make_client, make_link):
    client = make_client()
    link = make_link(client['client_id'])

    resp = api.delete(f"/api/approval-links/{link['link_id']}", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.get_json()['deleted'] is True

    resp = api.delete(f"/api/approval-links/{link['link_id']}", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.get_json()['deleted'] is False

    resp = api.get(f"/api/approval?token={link['unique_token']}")
    assert resp.status_code == 404


def test_list_links_for_client(api, auth_headers, make_client, make_link):
    client = make_client()
    first = make_link(client['client_id'])
    second = make_link(client['client_id'])

    resp = api.get(f"/api/clients/{client['client_id']}/approval-links", headers=auth_headers)
    assert resp.status_code == 200
    links = resp.get_json()['approval_links']
    assert {link['link_id'] for link in links} == {first['link_id'], second['link_id']}
    assert all(link['share_url'].startswith('https://agency.test/approval?token=') for link in links)


def test_link_endpoints_require_login(api):
    assert api.post('/api/clients/anything/approval-links').status_code == 401
    assert api.delete('/api/approval-links/anything').status_code == 401
