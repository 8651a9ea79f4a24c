"""Central constants shared across the storage core and the API."""

from typing import Final

# Entity key namespaces ("<entityName>/<id>") and their index keys.
USER_ENTITY: Final[str] = "user"
USER_INDEX: Final[str] = "users"
CHAT_ENTITY: Final[str] = "chat"
CHAT_INDEX: Final[str] = "chats"
QUESTION_ENTITY: Final[str] = "question"
QUESTION_INDEX: Final[str] = "questions"
ATTACHMENT_ENTITY: Final[str] = "attachment"
ATTACHMENT_INDEX: Final[str] = "attachments"

KEY_SEPARATOR: Final[str] = "/"

# Envelope keys of a stored record value.
K_VERSION: Final[str] = "version"
K_RECORD: Final[str] = "record"

DIVISIONS: Final[tuple[str, ...]] = (
    "Epidemiology",
    "Clinical Services",
    "Pharma",
    "Public Health",
    "Logistics",
)

# Author recorded on comments; there is no real user session.
DEFAULT_COMMENT_AUTHOR: Final[str] = "Admin User"

RECENT_ACTIVITY_SIZE: Final[int] = 10
TOP_TAGS_SIZE: Final[int] = 5
