from .distribution import DistributionService  # noqa
from .idempotency import IdempotencyStore  # noqa
from .media import MediaValidator  # noqa
from .submission import (  # noqa
    PostSubmissionService,
    SubmissionOptions,
    SubmissionStages,
)
