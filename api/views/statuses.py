import logging
from typing import Literal

from hatchway import ApiError, Schema, api_view

from activities.models import Post
from activities.services import PostSubmissionService, SubmissionOptions
from api import schemas
from api.decorators import scope_required
from core.exceptions import NotFoundError, StorageError, ValidationError

logger = logging.getLogger(__name__)


class PostStatusSchema(Schema):
    status: str = ""
    in_reply_to_id: str | None = None
    sensitive: bool | None = None
    spoiler_text: str | None = None
    visibility: Literal["public", "unlisted", "private", "direct"] | None = None
    local_only: bool = False
    monologuing: bool = False
    language: str | None = None
    media_ids: list[str] = []


visibility_map = {
    "public": Post.Visibilities.public,
    "unlisted": Post.Visibilities.unlisted,
    "private": Post.Visibilities.followers,
    "direct": Post.Visibilities.mentioned,
}


@scope_required("write:statuses")
@api_view.post
def post_status(request, details: PostStatusSchema) -> schemas.Status:
    if len(details.status) == 0 and not details.media_ids:
        raise ApiError(400, "Status is empty")
    # Unknown parents are dropped, not rejected
    reply_post = None
    if details.in_reply_to_id:
        try:
            reply_post = Post.by_id(int(details.in_reply_to_id))
        except (ValueError, NotFoundError):
            pass
    if details.local_only:
        visibility = Post.Visibilities.local_only
    elif details.visibility:
        visibility = visibility_map[details.visibility]
    else:
        visibility = None
    options = SubmissionOptions(
        monologue=details.monologuing,
        sensitive=details.sensitive,
        visibility=visibility,
        spoiler_text=details.spoiler_text,
        media_ids=details.media_ids,
        application=request.token.application if request.token else None,
        idempotency=request.headers.get("Idempotency-Key"),
        language=details.language,
    )
    try:
        post = PostSubmissionService().submit(
            request.identity,
            details.status,
            reply_to=reply_post,
            options=options,
        )
    except ValidationError as e:
        raise ApiError(422, e.message)
    except StorageError as e:
        logger.error("Could not store post for %s: %s", request.identity, e)
        raise ApiError(503, "Could not save the status, try again later")
    return schemas.Status.from_post(post)
