"""Command-line sender for the webhook bot clients.

Usage:
    python -m chatbot_notify feishu "Deploy finished"
    python -m chatbot_notify wecom "**Deploy** finished" --markdown
    python -m chatbot_notify wecom "Disk almost full" --mention @all
"""

import argparse
import logging
import sys
from collections.abc import Sequence

from dotenv import load_dotenv

from chatbot_notify.exceptions import BotClientError
from chatbot_notify.feishu.client import FeishuBotClient
from chatbot_notify.paths import PROJECT_ROOT
from chatbot_notify.utils.logging import configure_logging
from chatbot_notify.wecom.client import WeComBotClient

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    :returns: Configured parser.
    """
    parser = argparse.ArgumentParser(
        prog="chatbot_notify",
        description="Send a message through a Feishu or WeCom bot webhook.",
    )
    parser.add_argument("provider", choices=("feishu", "wecom"), help="Target platform")
    parser.add_argument("message", help="Message text (or markdown with --markdown)")
    parser.add_argument(
        "--markdown",
        action="store_true",
        help="Send as a markdown message (wecom only)",
    )
    parser.add_argument(
        "--mention",
        action="append",
        default=None,
        metavar="USER_ID",
        help="User ID to mention, repeatable; '@all' mentions everyone (wecom only)",
    )
    parser.add_argument(
        "--mention-mobile",
        action="append",
        default=None,
        metavar="MOBILE",
        help="Mobile number to mention, repeatable (wecom only)",
    )
    return parser


def _send(args: argparse.Namespace) -> None:
    if args.provider == "feishu":
        FeishuBotClient.from_config().send_text(args.message)
        return

    client = WeComBotClient.from_config()
    if args.markdown:
        client.send_markdown(args.message)
    else:
        client.send_text(
            args.message,
            mentioned_list=args.mention,
            mentioned_mobile_list=args.mention_mobile,
        )


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the command-line sender.

    :param argv: Command-line arguments. Defaults to sys.argv.
    :returns: Process exit status.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.provider == "feishu" and (args.markdown or args.mention or args.mention_mobile):
        parser.error("--markdown, --mention and --mention-mobile are only supported for wecom")

    load_dotenv(PROJECT_ROOT / ".env")
    configure_logging()

    try:
        _send(args)
    except BotClientError as e:
        print(f"Failed to send message: {e}", file=sys.stderr)
        return 1

    logger.info(f"Message delivered via {args.provider}")
    return 0
