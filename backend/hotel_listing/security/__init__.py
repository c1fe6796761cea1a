# Security package init
from hotel_listing.security.auth import (
    Principal,
    create_access_token,
    decode_access_token,
    get_current_principal,
    get_optional_principal,
    hash_password,
    require_roles,
    verify_password,
)

__all__ = [
    "Principal",
    "create_access_token",
    "decode_access_token",
    "get_current_principal",
    "get_optional_principal",
    "hash_password",
    "require_roles",
    "verify_password",
]
