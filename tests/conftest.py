import pytest
from django.core.cache import caches
from django.test import Client

from activities.models import Post
from api.models import Application, Token
from miniq.models import Task
from users.models import Domain, Identity, User


class RecordingDispatcher:
    """
    Collects enqueue calls in memory instead of writing Task rows
    """

    def __init__(self, fail_on: set[str] | None = None):
        self.enqueued: list[tuple[str, int]] = []
        self.fail_on = fail_on or set()

    def enqueue(self, task_name, subject):
        if task_name in self.fail_on:
            raise RuntimeError(f"Queue rejected {task_name}")
        self.enqueued.append((str(task_name), subject))

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.enqueued]


@pytest.fixture(autouse=True)
def _test_settings(settings):
    settings.SETUP.MAIN_DOMAIN = "example.com"
    settings.SETUP.LOCAL_HTTPS = True
    settings.MAIN_DOMAIN = "example.com"


@pytest.fixture(autouse=True)
def _clear_cache():
    # locmem survives between tests
    caches["default"].clear()
    yield
    caches["default"].clear()


@pytest.fixture
def dispatcher() -> RecordingDispatcher:
    return RecordingDispatcher()


@pytest.fixture
def queued_tasks():
    """
    Returns a callable listing (type, subject) for every queued Task
    """

    def inner():
        return list(Task.objects.order_by("id").values_list("type", "subject"))

    return inner


@pytest.fixture
@pytest.mark.django_db
def user() -> User:
    return User.objects.create(email="test@example.com")


@pytest.fixture
@pytest.mark.django_db
def domain() -> Domain:
    return Domain.objects.create(domain="example.com", local=True)


@pytest.fixture
@pytest.mark.django_db
def identity(user, domain) -> Identity:
    """
    Creates a basic test identity with a user and domain.
    """
    identity = Identity.objects.create(
        username="test",
        domain=domain,
        name="Test User",
        local=True,
    )
    identity.users.set([user])
    return identity


@pytest.fixture
@pytest.mark.django_db
def other_identity(user, domain) -> Identity:
    """
    Creates a different basic test identity with a user and domain.
    """
    identity = Identity.objects.create(
        username="other",
        domain=domain,
        name="Other User",
        local=True,
    )
    identity.users.set([user])
    return identity


@pytest.fixture
@pytest.mark.django_db
def remote_identity() -> Identity:
    """
    Creates a basic remote test identity with a domain.
    """
    domain = Domain.objects.create(domain="remote.test", local=False)
    return Identity.objects.create(
        username="test",
        domain=domain,
        name="Test Remote User",
        local=False,
    )


@pytest.fixture
@pytest.mark.django_db
def api_token(identity) -> Token:
    """
    Creates an API application and a token for the test identity
    """
    application = Application.objects.create(
        name="Test App",
        client_id="tk-test",
        client_secret="mytestappsecret",
    )
    return Token.objects.create(
        application=application,
        user=identity.users.first(),
        identity=identity,
        token="mytestapitoken",
        scopes=["read", "write", "follow", "push"],
    )


@pytest.fixture
def api_client(api_token):
    return Client(
        HTTP_AUTHORIZATION=f"Bearer {api_token.token}",
        HTTP_ACCEPT="application/json",
    )


@pytest.fixture
def post_factory():
    """
    Returns a callable that inserts a Post directly, skipping the pipeline
    """

    def inner(author, content="Hello world", **kwargs):
        return Post.objects.create(author=author, content=content, **kwargs)

    return inner


@pytest.fixture
def failing_dispatcher():
    """
    Returns a callable making a dispatcher that rejects the named tasks
    """

    def inner(*task_names):
        return RecordingDispatcher(fail_on=set(task_names))

    return inner
