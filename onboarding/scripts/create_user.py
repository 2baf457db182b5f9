"""
Create a user (e.g. the first admin). Run from project root:
  python -m onboarding.scripts.create_user EMAIL PASSWORD [role]
Example:
  python -m onboarding.scripts.create_user admin@example.com your-secure-password admin
"""
import argparse
import logging
import sys

from onboarding.core.database import SessionLocal
from onboarding.core.errors import OnboardingError
from onboarding.models import Role
from onboarding.services.auth import AuthService
from onboarding.stores import SqlUserStore

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create an onboarding API user.")
    parser.add_argument("email", help="Email address (login name)")
    parser.add_argument("password", help="Password (8-128 chars)")
    parser.add_argument(
        "role",
        nargs="?",
        default=Role.CUSTOMER.value,
        choices=[r.value for r in Role],
    )
    args = parser.parse_args(argv)

    db = SessionLocal()
    try:
        # Operator CLI: admins may always be created here.
        result = AuthService(SqlUserStore(db), allow_admin_registration=True).register(
            args.email.strip(), args.password, args.role
        )
    except OnboardingError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{result.user.email}' with role '{result.user.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
