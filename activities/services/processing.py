import re

from activities.models import Hashtag, Post
from users.models import Identity


class LanguageDetector:
    """
    Works out what language a new Post is written in, before it is saved.
    No detection engine is wired in by default, so this returns None and the
    client-supplied language (if any) is all we store.
    """

    def detect(self, text: str, author: Identity) -> str | None:
        return None


class PostProcessor:
    """
    Something that runs on a freshly committed Post, before it is
    distributed.
    """

    def process(self, post: Post) -> None:
        raise NotImplementedError()


class MentionProcessor(PostProcessor):
    """
    Links the identities a Post mentions (plus the author being replied to).
    Only identities we already know about are linked.
    """

    MENTION_REGEX = re.compile(
        r"(^|[^\w\d\-_/])@([\w\d\-_]+(?:@[\w\d\-_\.]+[\w\d\-_]+)?)"
    )

    def process(self, post: Post) -> None:
        mentions = set()
        for _, handle in self.MENTION_REGEX.findall(post.full_content or post.content):
            handle = handle.lower()
            if "@" in handle:
                username, domain = handle.split("@", 1)
            else:
                username = handle
                domain = post.author.domain_id
            identity = Identity.by_username_and_domain(username, domain)
            if identity is not None:
                mentions.add(identity)
        if post.in_reply_to:
            mentions.add(post.in_reply_to.author)
        if mentions:
            post.mentions.set(mentions)


class HashtagProcessor(PostProcessor):

    HASHTAG_REGEX = re.compile(r"\B#([a-zA-Z0-9_]+\b)(?!;)")

    def process(self, post: Post) -> None:
        names = sorted(
            {
                tag.lower()
                for tag in self.HASHTAG_REGEX.findall(post.full_content or post.content)
            }
        )
        if names:
            post.hashtags.set(Hashtag.ensure(names))
