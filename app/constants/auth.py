"""
Authentication Constants

Credential length rules and the client-facing error messages returned by
the register and login mutations.
"""

# Lengths at or below these floors are rejected at registration
USERNAME_LENGTH_FLOOR = 2
PASSWORD_LENGTH_FLOOR = 3

# Message text is parsed by existing clients; keep it byte-for-byte,
# including the "exsist" spelling.
USERNAME_TOO_SHORT_MESSAGE = f"username is too small, must be longer than {USERNAME_LENGTH_FLOOR} characters"
PASSWORD_TOO_SHORT_MESSAGE = f"password is too small, must be longer than {PASSWORD_LENGTH_FLOOR} characters"
USERNAME_TAKEN_MESSAGE = "username already been taken"
USERNAME_NOT_FOUND_MESSAGE = "username does not exsist"
PASSWORD_INCORRECT_MESSAGE = "password is incorrect"

# Session key holding the authenticated user's id
SESSION_USER_ID_KEY = "userId"
