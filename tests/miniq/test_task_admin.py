import pytest

from miniq.dispatch import QueueDispatcher
from users.models import User


@pytest.fixture
def admin_client(client):
    client.force_login(User.objects.create(email="admin@example.com", admin=True))
    return client


@pytest.mark.django_db
def test_changelist_by_type(admin_client):
    dispatcher = QueueDispatcher()
    dispatcher.enqueue("link_crawl", 987654321)
    dispatcher.enqueue("federated_deliver", 123456789)
    response = admin_client.get("/djadmin/miniq/task/?type=link_crawl")
    assert response.status_code == 200
    content = response.content.decode()
    assert "987654321" in content
    assert "123456789" not in content


@pytest.mark.django_db
def test_no_manual_tasks(admin_client):
    response = admin_client.get("/djadmin/miniq/task/add/")
    assert response.status_code == 403
