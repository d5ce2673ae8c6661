"""User documents."""
USERS = "users"


def new_user_document(
    email: str,
    username: str,
    password_hash: str,
    grade: str,
    region: str,
) -> dict:
    return {
        "email": email,
        "username": username,
        "password": password_hash,
        "grade": grade,
        "region": region,
    }
