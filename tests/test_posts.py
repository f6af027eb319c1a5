def test_create_post_stores_wall_clock_schedule(api, auth_headers, make_client, make_post):
    client = make_client()
    post = make_post(client['client_id'], scheduled_date='2025-03-01T23:30')

    assert post['scheduled_date'] == '2025-03-01T23:30'
    assert post['version'] == 1
    assert post['carousel_images'] == []

    resp = api.get(f"/api/posts/{post['post_id']}", headers=auth_headers)
    assert resp.get_json()['post']['scheduled_date'] == '2025-03-01T23:30'


def test_create_post_rejects_bad_schedule_and_unknown_client(api, auth_headers, make_client):
    client = make_client()
    resp = api.post('/api/posts', json={
        "client_id": client['client_id'], "title": "X", "scheduled_date": "01/03/2025"
    }, headers=auth_headers)
    assert resp.status_code == 400

    resp = api.post('/api/posts', json={"client_id": "missing", "title": "X"}, headers=auth_headers)
    assert resp.status_code == 404


def test_media_must_match_format(api, auth_headers, make_client):
    client = make_client()
    resp = api.post('/api/posts', json={
        "client_id": client['client_id'],
        "title": "Reel dos bastidores",
        "format": "reel",
        "image_url": "https://cdn.agency.test/foto.png",
    }, headers=auth_headers)
    assert resp.status_code == 400
    assert 'image_url' in resp.get_json()['details']


def test_changing_format_clears_old_media(api, auth_headers, make_client, make_post):
    client = make_client()
    post = make_post(client['client_id'], format='reel', image_url=None,
                     video_url='https://cdn.agency.test/reel.mp4')
    assert post['video_url'] == 'https://cdn.agency.test/reel.mp4'

    resp = api.patch(f"/api/posts/{post['post_id']}", json={
        "format": "carrossel",
        "carousel_images": ["https://cdn.agency.test/1.png", "https://cdn.agency.test/2.png"],
    }, headers=auth_headers)
    assert resp.status_code == 200
    updated = resp.get_json()['post']
    assert updated['format'] == 'carrossel'
    assert updated['video_url'] is None
    assert updated['image_url'] is None
    assert len(updated['carousel_images']) == 2


def test_stale_version_is_a_conflict(api, auth_headers, make_client, make_post):
    client = make_client()
    post = make_post(client['client_id'])

    resp = api.patch(f"/api/posts/{post['post_id']}", json={"title": "Novo título", "version": 1},
                     headers=auth_headers)
    assert resp.status_code == 200
    assert resp.get_json()['post']['version'] == 2

    resp = api.patch(f"/api/posts/{post['post_id']}", json={"caption": "Outra legenda", "version": 1},
                     headers=auth_headers)
    assert resp.status_code == 409
    assert resp.get_json()['details'] == {"expected_version": 1, "current_version": 2}


def test_send_for_approval_requires_media(api, auth_headers, make_client, make_post):
    client = make_client()
    post = make_post(client['client_id'], status='em_criacao', image_url=None)

    resp = api.post(f"/api/posts/{post['post_id']}/send-for-approval", headers=auth_headers)
    assert resp.status_code == 400
    assert 'image_url' in resp.get_json()['details']

    api.patch(f"/api/posts/{post['post_id']}", json={"image_url": "https://cdn.agency.test/p.png"},
              headers=auth_headers)
    resp = api.post(f"/api/posts/{post['post_id']}/send-for-approval", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.get_json()['post']['status'] == 'aguardando_aprovacao'


def test_resending_rejected_post_clears_reason(api, auth_headers, make_client, make_post, make_link):
    client = make_client()
    token = make_link(client['client_id'])['unique_token']
    post = make_post(client['client_id'])
    api.post(f"/api/approval/posts/{post['post_id']}/reject?token={token}", json={"reason": "Trocar a foto"})

    resp = api.post(f"/api/posts/{post['post_id']}/send-for-approval", headers=auth_headers)
    assert resp.status_code == 200
    resent = resp.get_json()['post']
    assert resent['status'] == 'aguardando_aprovacao'
    assert resent['rejection_reason'] is None


def test_move_across_board(api, auth_headers, make_client, make_post):
    client = make_client()
    post = make_post(client['client_id'], status='aprovado')

    for status in ('agendado', 'postado'):
        resp = api.post(f"/api/posts/{post['post_id']}/move", json={"status": status}, headers=auth_headers)
        assert resp.status_code == 200
        assert resp.get_json()['post']['status'] == status

    resp = api.post(f"/api/posts/{post['post_id']}/move", json={"status": "arquivado"}, headers=auth_headers)
    assert resp.status_code == 400

    resp = api.post('/api/posts/missing/move', json={"status": "postado"}, headers=auth_headers)
    assert resp.status_code == 404


def test_board_groups_posts_by_status(api, auth_headers, make_client, make_post):
    client = make_client()
    make_post(client['client_id'], title="A", status='pendente')
    make_post(client['client_id'], title="B", status='aguardando_aprovacao')
    make_post(client['client_id'], title="C", status='aguardando_aprovacao')

    resp = api.get('/api/posts/board', headers=auth_headers)
    assert resp.status_code == 200
    body = resp.get_json()
    assert body['columns'] == ['pendente', 'em_criacao', 'aguardando_aprovacao', 'aprovado', 'agendado', 'postado']
    assert [p['title'] for p in body['board']['pendente']] == ['A']
    assert sorted(p['title'] for p in body['board']['aguardando_aprovacao']) == ['B', 'C']
    assert body['board']['rejeitado'] == []


def test_calendar_range_uses_local_day(api, auth_headers, make_client, make_post):
    client = make_client()
    make_post(client['client_id'], title="Fim do mês", scheduled_date='2025-03-31T23:45')
    make_post(client['client_id'], title="Início", scheduled_date='2025-03-01T00:15')
    make_post(client['client_id'], title="Abril", scheduled_date='2025-04-01T00:00')
    make_post(client['client_id'], title="Sem data", scheduled_date=None)

    resp = api.get('/api/posts/calendar?start=2025-03-01&end=2025-03-31', headers=auth_headers)
    assert resp.status_code == 200
    assert [p['title'] for p in resp.get_json()['posts']] == ["Início", "Fim do mês"]

    resp = api.get('/api/posts/calendar?start=março', headers=auth_headers)
    assert resp.status_code == 400


def test_list_posts_filters(api, auth_headers, make_client, make_post, make_link):
    client = make_client()
    token = make_link(client['client_id'])['unique_token']
    waiting = make_post(client['client_id'])
    make_post(client['client_id'], title="Publicado", status='postado')
    api.post(f"/api/approval/posts/{waiting['post_id']}/boost?token={token}", json={"notes": "Impulsionar"})

    resp = api.get('/api/posts?status=postado', headers=auth_headers)
    assert [p['title'] for p in resp.get_json()['posts']] == ["Publicado"]

    resp = api.get('/api/posts?boost_requested=true', headers=auth_headers)
    assert [p['post_id'] for p in resp.get_json()['posts']] == [waiting['post_id']]


def test_boost_processed_keeps_notes(api, auth_headers, make_client, make_post, make_link):
    client = make_client()
    token = make_link(client['client_id'])['unique_token']
    post = make_post(client['client_id'])
    api.post(f"/api/approval/posts/{post['post_id']}/boost?token={token}", json={"notes": "add hashtags"})

    resp = api.post(f"/api/posts/{post['post_id']}/boost-processed", headers=auth_headers)
    assert resp.status_code == 200
    processed = resp.get_json()['post']
    assert processed['boost_requested'] is False
    assert processed['boost_notes'] == "add hashtags"


def test_delete_post(api, auth_headers, register, make_client, make_post):
    client = make_client()
    post = make_post(client['client_id'])
    other_headers, _ = register(email='outra@studio.com')

    assert api.delete(f"/api/posts/{post['post_id']}", headers=other_headers).status_code == 404
    assert api.delete(f"/api/posts/{post['post_id']}", headers=auth_headers).status_code == 200
    assert api.get(f"/api/posts/{post['post_id']}", headers=auth_headers).status_code == 404


def test_rejection_reason_only_kept_on_rejected_posts(api, auth_headers, make_client, make_post, make_link):
    client = make_client()
    approved = make_post(client['client_id'], status='aprovado')

    resp = api.patch(f"/api/posts/{approved['post_id']}", json={"rejection_reason": "Trocar a foto"},
                     headers=auth_headers)
    assert resp.status_code == 200
    assert resp.get_json()['post']['status'] == 'aprovado'
    assert resp.get_json()['post']['rejection_reason'] is None

    token = make_link(client['client_id'])['unique_token']
    post = make_post(client['client_id'])
    api.post(f"/api/approval/posts/{post['post_id']}/reject?token={token}", json={"reason": "Trocar a foto"})

    resp = api.patch(f"/api/posts/{post['post_id']}", json={"caption": "Nova legenda"}, headers=auth_headers)
    assert resp.get_json()['post']['rejection_reason'] == "Trocar a foto"

    resp = api.patch(f"/api/posts/{post['post_id']}", json={"rejection_reason": "Trocar a legenda"},
                     headers=auth_headers)
    assert resp.get_json()['post']['rejection_reason'] == "Trocar a legenda"


def test_move_ignores_extra_fields(api, auth_headers, make_client, make_post):
    client = make_client()
    post = make_post(client['client_id'], status='aprovado')

    resp = api.post(f"/api/posts/{post['post_id']}/move",
                    json={"status": "agendado", "post_id": post['post_id']}, headers=auth_headers)
    assert resp.status_code == 200
    assert resp.get_json()['post']['status'] == 'agendado'
