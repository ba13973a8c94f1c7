from .application import Application  # noqa
from .token import Token  # noqa
