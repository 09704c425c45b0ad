#!/usr/bin/env python3
"""
Command line entry point.

    tenancy-client space-users <space_guid> [--token TOKEN]
"""

import argparse
import asyncio
import logging
import os
import sys

import sentry_sdk

from tenancy_client import config
from tenancy_client.client import Client
from tenancy_client.core.exceptions import ClientException
from tenancy_client.core.sentry import get_sentry_kwargs

logger = logging.getLogger(__name__)


async def space_users(space_guid: str, token: str) -> int:
    async with Client() as client:
        try:
            first_page = await client.spaces.list_users(space_guid, token)
            users = await first_page.collect_all(token)
        except ClientException as e:
            logger.error(f"Could not list the users of space {space_guid}: {e}")
            return 1
    for user in users:
        print(f"{user.guid}\t{user.username or ''}")
    logger.info(f"{len(users)} users in space {space_guid}")
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="tenancy-client")
    commands = parser.add_subparsers(dest="command", required=True)
    users_parser = commands.add_parser("space-users", help="list every user of a space")
    users_parser.add_argument("space_guid")
    users_parser.add_argument("--token", default=os.environ.get("TENANCY_TOKEN"))
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.LOG_LEVEL or "INFO")
    if config.SENTRY_DSN:
        sentry_sdk.init(**get_sentry_kwargs())
    if not args.token:
        parser.error("a token is required, use --token or TENANCY_TOKEN")
    if not config.HOST:
        parser.error("HOST is not configured")

    return asyncio.run(space_users(args.space_guid, args.token))


if __name__ == "__main__":
    sys.exit(main())
