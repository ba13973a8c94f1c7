from .domain import Domain  # noqa
from .identity import Identity  # noqa
from .user import User, UserManager  # noqa
