from medihelp.chat.factory import ChatClientFactory
from medihelp.chat.models import Message, Role, SessionState
from medihelp.chat.session import ConversationSession

__all__ = ["ChatClientFactory", "ConversationSession", "Message", "Role", "SessionState"]
