from .get_chat import GetChatHandler, GetChatQuery
from .list_chats import ListChatsHandler, ListChatsQuery

__all__ = ["GetChatHandler", "GetChatQuery", "ListChatsHandler", "ListChatsQuery"]
