import argparse
import logging
import sys

from .config import config_from_args, validate_timeout
from .constants import (
    DEBUG_MODE,
    DEFAULT_ACTION_NAME,
    DEFAULT_CHANNEL,
    DEFAULT_ICON_URL,
    MS_TEAMS_TIMEOUT_SECONDS,
    MS_TEAMS_WEBHOOK_URL,
    SENSU_DASHBOARD_URL,
)
from .controller import handle_event
from .errors import ConfigurationError, HandlerError

logger = logging.getLogger("sensu_teams")


def positive_float(value):
    try:
        return validate_timeout(value)
    except ConfigurationError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sensu-teams-handler",
        description="The Sensu Go Microsoft Teams handler for notifying a channel",
    )
    parser.add_argument("-w", "--webhook-url", default=MS_TEAMS_WEBHOOK_URL,
                        help="The webhook url to send messages to (env MS_TEAMS_WEBHOOK_URL)")
    parser.add_argument("-c", "--channel", default=DEFAULT_CHANNEL,
                        help="#notifications-room, optional defaults to webhook defined")
    parser.add_argument("-p", "--message-prefix", default="",
                        help="optional prefix - can be used for mentions")
    parser.add_argument("-b", "--bot-name", default="",
                        help="optional bot name, defaults to webhook defined")
    parser.add_argument("-i", "--icon-url", default=DEFAULT_ICON_URL,
                        help="A URL to an image to use as the user avatar")
    parser.add_argument("-a", "--action-name", default=DEFAULT_ACTION_NAME,
                        help="The text that will be displayed on screen for the action")
    parser.add_argument("-d", "--dashboard", default=SENSU_DASHBOARD_URL,
                        help="The url to the sensu dashboard (env SENSU_DASHBOARD_URL)")
    parser.add_argument("-t", "--timeout", type=positive_float, default=MS_TEAMS_TIMEOUT_SECONDS,
                        help="Timeout in seconds for the webhook call")
    parser.add_argument("--debug", action="store_true", default=DEBUG_MODE,
                        help="Enable debug logging (env DEBUG_MODE)")
    return parser


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv=None, stdin=None) -> int:
    parser = build_parser()
    args, extra = parser.parse_known_args(argv)
    configure_logging(args.debug)

    if extra:
        parser.print_help(sys.stderr)
        logger.error(f"invalid argument(s) received: {' '.join(extra)}")
        return 1

    if stdin is None:
        stdin = sys.stdin.buffer

    try:
        config = config_from_args(args)
        if not config.webhook_url:
            parser.print_help(sys.stderr)
        handle_event(config, stdin)
    except HandlerError as exc:
        logger.error(str(exc))
        return 1
    return 0
