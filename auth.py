# auth.py - read capability hints out of the stored API token
from __future__ import annotations
import base64
import binascii
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from constants import SERVICE_FLAGS

logger = logging.getLogger(__name__)

ADMIN_ROLES = {"admin", "administrador"}


@dataclass(frozen=True)
class ViewerHints:
    """
    What the UI should offer this viewer. The token is decoded without
    signature verification, so these are display hints only; the API decides
    what a request may actually do.
    """
    role: str = ""
    is_admin: bool = False
    services: Optional[Tuple[str, ...]] = None  # None = every service category


def decode_claims(token: Optional[str]) -> Dict[str, Any]:
    """Payload segment of a JWT-style token, or {} when it can't be read."""
    if not token:
        return {}
    parts = token.split(".")
    if len(parts) < 2:
        return {}
    segment = parts[1] + "=" * (-len(parts[1]) % 4)
    try:
        claims = json.loads(base64.urlsafe_b64decode(segment.encode("ascii")))
    except (binascii.Error, UnicodeError, ValueError) as e:
        logger.warning("Could not decode token payload: %s", e)
        return {}
    return claims if isinstance(claims, dict) else {}


def _role_from(claims: Dict[str, Any]) -> str:
    for key in ("role", "roles", "http://schemas.microsoft.com/ws/2008/06/identity/claims/role"):
        value = claims.get(key)
        if isinstance(value, list):
            value = value[0] if value else None
        if value:
            return str(value)
    return ""


def viewer_hints(token: Optional[str]) -> ViewerHints:
    claims = decode_claims(token)
    role = _role_from(claims)
    is_admin = role.lower() in ADMIN_ROLES

    services = claims.get("services")
    if is_admin or not isinstance(services, list):
        allowed = None
    else:
        allowed = tuple(s for s in (str(x).lower() for x in services) if s in SERVICE_FLAGS)
    return ViewerHints(role=role, is_admin=is_admin, services=allowed)
