def test_register_returns_tokens(api):
    resp = api.post('/api/auth/register', json={
        "name": "Mariana", "email": "Mari@Studio.com", "password": "Secure#Pass1"
    })
    assert resp.status_code == 201
    body = resp.get_json()
    assert body['user']['email'] == 'mari@studio.com'
    assert body['access_token']
    assert body['refresh_token']
    assert 'password_hash' not in body['user']


def test_register_rejects_duplicate_email(api, register):
    register()
    resp = api.post('/api/auth/register', json={
        "name": "Outra", "email": "mari@studio.com", "password": "Secure#Pass1"
    })
    assert resp.status_code == 400
    assert resp.get_json()['error'] == "Email already registered"


def test_register_rejects_weak_password(api):
    resp = api.post('/api/auth/register', json={
        "name": "Mariana", "email": "mari@studio.com", "password": "fraca"
    })
    assert resp.status_code == 400
    assert 'password' in resp.get_json()['details']


def test_login(api, register):
    register()
    resp = api.post('/api/auth/login', json={"email": "mari@studio.com", "password": "Secure#Pass1"})
    assert resp.status_code == 200
    assert resp.get_json()['access_token']

    resp = api.post('/api/auth/login', json={"email": "mari@studio.com", "password": "Wrong#Pass1"})
    assert resp.status_code == 401

    resp = api.post('/api/auth/login', json={"email": "ninguem@studio.com", "password": "Secure#Pass1"})
    assert resp.status_code == 401


def test_me_and_logout(api, auth_headers):
    resp = api.get('/api/auth/me', headers=auth_headers)
    assert resp.status_code == 200
    assert resp.get_json()['user']['name'] == 'Mariana'

    assert api.post('/api/auth/logout', headers=auth_headers).status_code == 200

    resp = api.get('/api/auth/me', headers=auth_headers)
    assert resp.status_code == 401
    assert resp.get_json()['error'] == "Token revoked"


def test_refresh_issues_new_access_token(api):
    body = api.post('/api/auth/register', json={
        "name": "Mariana", "email": "mari@studio.com", "password": "Secure#Pass1"
    }).get_json()

    resp = api.post('/api/auth/refresh', headers={"Authorization": f"Bearer {body['refresh_token']}"})
    assert resp.status_code == 200
    new_token = resp.get_json()['access_token']

    resp = api.get('/api/auth/me', headers={"Authorization": f"Bearer {new_token}"})
    assert resp.status_code == 200


def test_missing_token_is_401(api):
    resp = api.get('/api/auth/me')
    assert resp.status_code == 401
    assert resp.get_json()['error'] == "Unauthorized"


def test_health(api):
    resp = api.get('/api/health')
    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok"}
