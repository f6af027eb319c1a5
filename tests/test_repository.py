import pytest

from agency.errors import ConflictError, ValidationFailedError
from agency.models.client import Client
from agency.models.personal import Task
from agency.services.repository import EntityRepository


def test_create_stamps_owner_and_scopes_reads(app, operator, register):
    _, user = operator
    _, other = register(email='outra@studio.com')

    with app.app_context():
        mine = EntityRepository(Client, owner_id=user['user_id'])
        theirs = EntityRepository(Client, owner_id=other['user_id'])

        client = mine.create({"name": "Padaria Central", "user_id": other['user_id']})
        assert client.user_id == user['user_id']
        assert mine.get(client.client_id) is not None
        assert theirs.get(client.client_id) is None
        assert theirs.update(client.client_id, {"name": "Roubado"}) is None
        assert theirs.delete(client.client_id) is False
        assert mine.get(client.client_id).name == "Padaria Central"


def test_filter_skips_empty_criteria_and_orders(app, operator):
    _, user = operator
    with app.app_context():
        repo = EntityRepository(Client, owner_id=user['user_id'])
        repo.create({"name": "Bistrô", "payment_status": "recebido"})
        repo.create({"name": "Academia", "payment_status": "atrasado"})
        repo.create({"name": "Café", "payment_status": "recebido"})

        assert [c.name for c in repo.filter({"payment_status": "recebido"}, "name")] == ["Bistrô", "Café"]
        assert [c.name for c in repo.filter({"payment_status": ""}, "-name")] == ["Café", "Bistrô", "Academia"]
        assert [c.name for c in repo.list("name")] == ["Academia", "Bistrô", "Café"]


def test_unknown_fields_are_rejected(app, operator):
    _, user = operator
    with app.app_context():
        repo = EntityRepository(Task, owner_id=user['user_id'])
        task = repo.create({"title": "Responder clientes"})

        with pytest.raises(ValidationFailedError):
            repo.filter({"priority": "alta"})
        with pytest.raises(ValidationFailedError):
            repo.list("-priority")
        with pytest.raises(ValidationFailedError):
            repo.update(task.task_id, {"priority": "alta"})


def test_update_ignores_primary_key_and_owner(app, operator, register):
    _, user = operator
    _, other = register(email='outra@studio.com')
    with app.app_context():
        repo = EntityRepository(Task, owner_id=user['user_id'])
        task = repo.create({"title": "Responder clientes"})
        task_id = task.task_id

        updated = repo.update(task_id, {"task_id": "hijacked", "user_id": other['user_id'], "completed": True})
        assert updated.task_id == task_id
        assert updated.user_id == user['user_id']
        assert updated.completed is True


def test_version_mismatch_raises_conflict(app, operator, make_client, make_post):
    _, user = operator
    client = make_client()
    post = make_post(client['client_id'])

    from agency.models.post import Post
    with app.app_context():
        repo = EntityRepository(Post, owner_id=user['user_id'])
        with pytest.raises(ConflictError):
            repo.update(post['post_id'], {"title": "Outro"}, expected_version=7)
        assert repo.get(post['post_id']).title == "Cardápio do dia"
