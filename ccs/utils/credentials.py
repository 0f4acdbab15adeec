import secrets
import string

ADMIN_USER_NAME = "admin"
PASSWORD_BITS = 130

_DIGITS = string.digits + string.ascii_lowercase[:22]


def generate_password(bits=PASSWORD_BITS):
    """
    :return: A cryptographically random password, i.e. a random number of ``bits`` bits written in base 32.
    """
    n = secrets.randbits(bits)
    if n == 0:
        return "0"
    chars = []
    while n:
        n, remainder = divmod(n, 32)
        chars.append(_DIGITS[remainder])
    return "".join(reversed(chars))
