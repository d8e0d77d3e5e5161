import random
import string

_ALPHABET = string.ascii_lowercase + string.digits
ID_LENGTH = 7


def generate_id() -> str:
    """Short random token used as the id of a resume entry. Not cryptographic."""
    return "".join(random.choice(_ALPHABET) for _ in range(ID_LENGTH))
