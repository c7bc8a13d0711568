"""Chat-related Models"""
from ..common_imports import *

AUTHOR_UID_ATTR = "csc-author-uid"
IS_USER_ATTR = "is_user"


@dataclass
class RenderedMessage:
    """A chat message as rendered by the host application"""
    name_text: Optional[str] = None     # Visible author name
    avatar_src: Optional[str] = None    # src of the avatar thumbnail image
    attributes: Dict[str, str] = field(default_factory=dict)

    @property
    def is_user(self) -> bool:
        return self.attributes.get(IS_USER_ATTR) == "true"

    @property
    def author_uid(self) -> Optional[str]:
        return self.attributes.get(AUTHOR_UID_ATTR)

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes

    def set_attribute(self, name: str, value: str):
        self.attributes[name] = value

    @classmethod
    def create(cls, name_text: Optional[str], avatar_src: Optional[str], is_user: bool = False) -> "RenderedMessage":
        return cls(
            name_text=name_text,
            avatar_src=avatar_src,
            attributes={IS_USER_ATTR: "true" if is_user else "false"},
        )
