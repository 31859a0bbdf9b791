from roomchat.client.api_client import ChatApiClient, Session

__all__ = ["ChatApiClient", "Session"]
