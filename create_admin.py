"""
Print a password hash for the admin login.

Put the output in ADMIN_PASSWORD_HASH (with ADMIN_USERNAME) so the plain
ADMIN_PASSWORD does not need to live in the environment.

    python create_admin.py <password>
"""
import sys
from feedbox.services.credential_service import hash_password

if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("usage: python create_admin.py <password>")
        sys.exit(1)
    print(hash_password(sys.argv[1]))
