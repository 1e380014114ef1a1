from .store import NoAccountsError, UnknownUserError, UserExistsError, UserStore

__all__ = ["UserStore", "UserExistsError", "UnknownUserError", "NoAccountsError"]
