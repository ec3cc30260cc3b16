from jobly.services.auth import (
    hash_password,
    verify_password,
    dummy_verify,
    create_access_token,
    create_user_token,
    decode_access_token,
)

__all__ = [
    "hash_password",
    "verify_password",
    "dummy_verify",
    "create_access_token",
    "create_user_token",
    "decode_access_token",
]
