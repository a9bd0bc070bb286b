#!/usr/bin/env python3
"""
Grant (or revoke) the ADMIN role for a user identified by external id.

There is no API path that creates the first administrator, so bootstrap one:
    python backend/scripts/promote_admin.py --external-id user_123 --email a@b.c
"""

from __future__ import annotations

import argparse
import json
from typing import List, Optional

from lms_backend.config import get_settings
from lms_backend.database import build_engine, init_db, session_context
from lms_backend.identity import Identity
from lms_backend.models import UserRole
from lms_backend.services import sync_user, update_user_role


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Set a user's role.")
    parser.add_argument("--external-id", required=True, help="Identity provider user id")
    parser.add_argument("--email", default="", help="Email to store when the user is created")
    parser.add_argument(
        "--role",
        choices=[role.value for role in UserRole],
        default=UserRole.ADMIN.value,
    )
    args = parser.parse_args(argv)

    engine = build_engine(get_settings())
    init_db(engine)
    try:
        with session_context(engine) as session:
            user = sync_user(session, Identity(subject=args.external_id, email=args.email))
            user = update_user_role(session, user.id, args.role)
            result = {"id": user.id, "external_id": user.external_id, "role": user.role.value}
    finally:
        engine.dispose()

    print(json.dumps(result, ensure_ascii=False))


if __name__ == "__main__":
    main()
