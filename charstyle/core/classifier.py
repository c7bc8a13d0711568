"""Message Classifier

Derives the entity id of a rendered chat message from what is visible on it
(author kind, name, avatar) and tags the message with it, so the generated
entity selectors match.
"""
from ..common_imports import *
from ..models.chat_models import RenderedMessage, AUTHOR_UID_ATTR
from ..models.entity import EntityKind, make_entity_id
from ..utils.helpers import strip_file_extension

BASE64_AVATAR = "base64-image"
THUMBNAIL_PATH = "thumbnail"


def _query_value(query: str, key: str) -> Optional[str]:
    """Raw (undecoded) value of `key` in a query string"""
    for pair in query.split("&"):
        name, sep, value = pair.partition("=")
        if sep and name == key:
            return value
    return None


def extract_avatar_reference(src: Optional[str]) -> Optional[str]:
    """Stable avatar file name from an avatar image src, None if there is none.

    Thumbnail URLs carry the file name in their `file` query parameter, which
    is percent-decoded (a literal `+` stays a `+`). Plain URLs and paths use
    their last segment as written, without decoding, since that is the form
    saved settings are keyed by. Inline data URIs have no stable identity and
    all map to the same sentinel, so every base64 avatar with the same name
    shares one style.
    """
    if not src:
        return None

    src = src.strip()
    if src.startswith("data:"):
        return BASE64_AVATAR

    parts = urlsplit(src)
    last_segment = parts.path.rsplit("/", 1)[-1]

    if last_segment == THUMBNAIL_PATH:
        file_value = _query_value(parts.query, "file")
        return unquote(file_value) if file_value else None

    return last_segment or None


def classify(is_user: bool, display_name: Optional[str], avatar_src: Optional[str]) -> Optional[str]:
    """Entity id for a message author, None when it cannot be derived"""
    kind = EntityKind.PERSONA if is_user else EntityKind.CHARACTER
    avatar_ref = extract_avatar_reference(avatar_src)
    if not avatar_ref:
        return None

    name = (display_name or "").strip()
    if kind == EntityKind.CHARACTER:
        # Known limitation: any dotted suffix goes, so "Dr. Sam" becomes "Dr"
        name = strip_file_extension(name)

    return make_entity_id(kind, name, avatar_ref)


def classify_message(message: RenderedMessage) -> Optional[str]:
    return classify(message.is_user, message.name_text, message.avatar_src)


class MessageClassifier:
    """Tags rendered messages with their author's entity id"""

    def __init__(self, attribute: str = AUTHOR_UID_ATTR):
        self.attribute = attribute

    def tag_message(self, message: RenderedMessage) -> bool:
        """Tag one message; already tagged messages are left as they are"""
        if message.has_attribute(self.attribute):
            return True

        entity_id = classify_message(message)
        if not entity_id:
            print("⚠️ Couldn't get message author id, leaving message unstyled")
            return False

        message.set_attribute(self.attribute, entity_id)
        return True

    def process_all_messages(self, messages: Iterable[RenderedMessage]) -> int:
        """Tag every message, returning how many were looked at"""
        count = 0
        for message in messages:
            self.tag_message(message)
            count += 1
        return count


class ChatObserver(QObject):
    """Event source for messages appearing in and leaving the chat"""

    message_added = Signal(object)
    message_removed = Signal(object)
    style_update_requested = Signal()

    def __init__(self, classifier: Optional[MessageClassifier] = None, parent=None):
        super().__init__(parent)
        self.classifier = classifier or MessageClassifier()

    def messages_added(self, messages: Iterable[RenderedMessage]):
        """Handle a batch of newly rendered messages"""
        added = False
        for message in messages:
            self.classifier.tag_message(message)
            self.message_added.emit(message)
            added = True

        if added:
            self.style_update_requested.emit()

    def messages_removed(self, messages: Iterable[RenderedMessage]):
        for message in messages:
            self.message_removed.emit(message)
