def _pay(api, headers, client_id, month, year, **fields):
    resp = api.post('/api/payments', json={
        "client_id": client_id, "month": month, "year": year, "amount": 800, **fields
    }, headers=headers)
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()['payment']


def test_payments_sorted_newest_period_first(api, auth_headers, make_client):
    client = make_client()
    _pay(api, auth_headers, client['client_id'], 'janeiro', 2025)
    _pay(api, auth_headers, client['client_id'], 'dezembro', 2024)
    _pay(api, auth_headers, client['client_id'], 'março', 2025)

    resp = api.get(f"/api/payments?client_id={client['client_id']}", headers=auth_headers)
    assert resp.status_code == 200
    periods = [(p['month'], p['year']) for p in resp.get_json()['payments']]
    assert periods == [('março', 2025), ('janeiro', 2025), ('dezembro', 2024)]


def test_payment_validation(api, auth_headers, make_client):
    client = make_client()
    resp = api.post('/api/payments', json={
        "client_id": client['client_id'], "month": "march", "year": 2025, "amount": 800
    }, headers=auth_headers)
    assert resp.status_code == 400
    assert 'month' in resp.get_json()['details']


def test_payment_for_foreign_client_is_404(api, register, make_client):
    client = make_client()
    other_headers, _ = register(email='outra@studio.com')
    resp = api.post('/api/payments', json={
        "client_id": client['client_id'], "month": "março", "year": 2025, "amount": 800
    }, headers=other_headers)
    assert resp.status_code == 404


def test_update_and_delete_payment(api, auth_headers, make_client):
    client = make_client()
    payment = _pay(api, auth_headers, client['client_id'], 'março', 2025)

    resp = api.patch(f"/api/payments/{payment['payment_id']}", json={
        "status": "recebido", "payment_date": "2025-03-05", "client_id": "elsewhere"
    }, headers=auth_headers)
    assert resp.status_code == 200
    updated = resp.get_json()['payment']
    assert updated['status'] == 'recebido'
    assert updated['payment_date'] == '2025-03-05'
    assert updated['client_id'] == client['client_id']

    assert api.delete(f"/api/payments/{payment['payment_id']}", headers=auth_headers).status_code == 200
    assert api.delete(f"/api/payments/{payment['payment_id']}", headers=auth_headers).status_code == 404
