# storefront/services/passwords.py
import hmac


def verify_password(stored: str, candidate: str) -> bool:
    # Passwords are kept in plain text. Replace this (and the value stored
    # by UserService.signup) to move to a hashed scheme.
    return hmac.compare_digest(stored.encode("utf-8"), candidate.encode("utf-8"))
