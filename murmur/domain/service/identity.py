"""Commenter identity helpers.

The identity hash groups comments by the same person and seeds their
identicon on the frontend. It is deterministic and unsalted on purpose: it is
a display key, not a credential.
"""

from hashlib import sha224

# Joining with "b" gives nicer looking identicons
_SEPARATOR = "b"


def _present(value: str | None) -> bool:
    return value is not None and value != ""


def identity_hash(
    author: str | None,
    email: str | None,
    website: str | None,
    remote_ip: str | None = None,
) -> str:
    """Derive a stable identity hash for a commenter.

    Profile fields take precedence: the present ones are joined in the order
    author, email, website and hashed. Without any profile data the remote
    address is hashed instead.

    Args:
        author: Display name, if given
        email: Email address, if given
        website: Website, if given
        remote_ip: Client IP address, if known

    Returns:
        SHA-224 hex digest, or "" when there is nothing to hash
    """
    profile = [value for value in (author, email, website) if _present(value)]
    if profile:
        data = _SEPARATOR.join(profile)
    elif _present(remote_ip):
        data = remote_ip
    else:
        return ""
    return sha224(data.encode("utf-8")).hexdigest()


def display_author(
    author: str | None,
    email: str | None,
    website: str | None,
) -> str | None:
    """Pick the name shown next to a comment.

    Email addresses are partially masked: ``jane@mail.example.com`` is shown
    as ``jane@****.example.com``.
    """
    if author is not None:
        return author
    if email is not None:
        user, _, domain = email.partition("@")
        first_dot = domain.find(".")
        trailing = domain[first_dot:] if first_dot != -1 else ""
        return f"{user}@****{trailing}"
    return website
