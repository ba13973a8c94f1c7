from typing import Literal

from hatchway import Field, Schema

from activities import models as activities_models


class Account(Schema):
    id: str
    username: str
    acct: str
    display_name: str


class Application(Schema):
    name: str
    website: str | None


class MediaAttachment(Schema):
    id: str
    type: Literal["unknown", "image", "gifv", "video", "audio"]
    url: str
    preview_url: str
    remote_url: str | None
    meta: dict
    description: str | None
    blurhash: str | None

    @classmethod
    def from_post_attachment(
        cls, attachment: activities_models.PostAttachment
    ) -> "MediaAttachment":
        return cls(**attachment.to_mastodon_json())


class StatusMention(Schema):
    id: str
    username: str
    acct: str


class StatusTag(Schema):
    name: str


class Status(Schema):
    id: str
    uri: str
    created_at: str
    account: Account
    content: str
    visibility: Literal["public", "unlisted", "private", "direct"]
    local_only: bool = False
    sensitive: bool
    spoiler_text: str
    media_attachments: list[MediaAttachment]
    mentions: list[StatusMention]
    tags: list[StatusTag]
    url: str | None = Field(...)
    in_reply_to_id: str | None = Field(...)
    in_reply_to_account_id: str | None = Field(...)
    application: Application | None = Field(...)
    language: str | None = Field(...)
    text: str | None = Field(...)

    @classmethod
    def from_post(cls, post: activities_models.Post) -> "Status":
        return cls(**post.to_mastodon_json())
