from events.identity.interfaces import ANONYMOUS, AuthSession, IdentityProvider, IdentityUser

__all__ = ["AuthSession", "ANONYMOUS", "IdentityProvider", "IdentityUser"]
