"""Issue an access token for calling the configuration API.

Usage:
    python -m scripts.issue_token --subject ops --role admin
    python -m scripts.issue_token --subject ci --authority CONFIGURATION_VIEW_PORT
"""

import argparse
from datetime import timedelta

from app.core.authorities import ROLE_AUTHORITIES, Authority
from app.services.token_service import TokenService


def main() -> None:
    parser = argparse.ArgumentParser(description="Issue a JWT access token")
    parser.add_argument("--subject", required=True, help="Token subject")
    parser.add_argument(
        "--role",
        default="none",
        help=f"Role granting authorities ({', '.join(ROLE_AUTHORITIES)})",
    )
    parser.add_argument(
        "--authority",
        action="append",
        default=[],
        choices=[str(a) for a in Authority],
        help="Extra authority to grant (repeatable)",
    )
    parser.add_argument(
        "--expires-minutes", type=int, default=None, help="Override token lifetime"
    )
    args = parser.parse_args()

    expires_in = (
        timedelta(minutes=args.expires_minutes) if args.expires_minutes else None
    )
    token = TokenService().create_access_token(
        subject=args.subject,
        role=args.role,
        authorities=args.authority,
        expires_in=expires_in,
    )
    print(token)


if __name__ == "__main__":
    main()
