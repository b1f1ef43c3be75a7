"""Per-resource checks, applied after the caller has been authenticated."""


def authorize_delete(chirp, user_id: str) -> bool:
    """Only the author of a chirp may delete it."""
    return chirp is not None and str(chirp.user_id) == str(user_id)
