"""Short random ids for public-facing records"""

import secrets

ID_ALPHABET = "0123456789abcdefghjkmnpqrstvwxyz"
ID_LENGTH = 15


def nano_id(size: int = ID_LENGTH) -> str:
    """Random id over a lowercase alphabet without easily confused letters (i, l, o, u)."""
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(size))


def get_id_generator():
    """FastAPI dependency returning the id generator used for new videos."""
    return nano_id
