# Entry point for the '/wt directions <origin> to <destination>' slash command.

import os
import json
import logging
import argparse
from collections.abc import Callable, Mapping
from dotenv import load_dotenv

from directions_structures import CommandInput, Waypoints
from directions_adapter import DirectionsAdapter, GoogleDirectionsAdapter, DEFAULT_TIMEOUT_SEC
from slack_messages import MESSAGE_ERROR, text_message, usage_message

logger = logging.getLogger(__name__)

WAYPOINT_DELIMITER = " to "
API_KEY_SECRET = "GOOGLE_API_KEY"
TIMEOUT_SETTING = "DIRECTIONS_TIMEOUT"


def parse_waypoints(raw_text: str | None) -> Waypoints | None:
    """
    Splits the command text into an origin and a destination.
    Returns None unless the text holds exactly one ' to ' with something on both sides.
    """
    if not raw_text:
        return None
    parts = raw_text.split(WAYPOINT_DELIMITER)
    if len(parts) != 2 or not all(parts):
        return None
    return Waypoints(origin=parts[0], destination=parts[1])


def get_google_api_key(secrets: Mapping | None) -> str | None:
    """Reads the Google API key from the secret store, warning when it is missing."""
    api_key = (secrets or {}).get(API_KEY_SECRET)
    if not api_key:
        logger.warning("The %s value has not been set. API call will likely fail.", API_KEY_SECRET)
        return None
    return api_key


def get_request_timeout(settings: Mapping | None = None) -> float:
    """Reads the upstream request timeout in seconds, falling back to the default."""
    settings = os.environ if settings is None else settings
    raw_timeout = settings.get(TIMEOUT_SETTING)
    if not raw_timeout:
        return DEFAULT_TIMEOUT_SEC
    try:
        timeout = float(raw_timeout)
    except ValueError:
        logger.warning("Invalid %s '%s'. Using %s seconds.", TIMEOUT_SETTING, raw_timeout, DEFAULT_TIMEOUT_SEC)
        return DEFAULT_TIMEOUT_SEC
    if timeout <= 0:
        logger.warning("%s must be positive. Using %s seconds.", TIMEOUT_SETTING, DEFAULT_TIMEOUT_SEC)
        return DEFAULT_TIMEOUT_SEC
    return timeout


def format_requester(user_name: str) -> str:
    """Formats a Slack user name as a mention."""
    return f"<@{user_name}>"


def get_directions(command: CommandInput, api_key: str | None = None,
                   adapter: DirectionsAdapter | None = None) -> dict:
    """
    Answers a single command invocation with exactly one Slack message.
    Unparseable text gets the usage message; every failure past that point
    is reported through the message text, never raised.
    """
    waypoints = parse_waypoints(command.raw_text)
    if waypoints is None:
        return usage_message()

    if adapter is None:
        adapter = GoogleDirectionsAdapter(api_key=api_key, timeout=get_request_timeout())
    try:
        return adapter.get_directions(command.requester_name, waypoints.origin, waypoints.destination)
    except Exception:
        logger.exception("Unexpected failure fetching directions for '%s'", command.raw_text)
        return text_message(MESSAGE_ERROR)


def handle(context: Mapping, callback: Callable[[None, dict], None]) -> None:
    """
    Webtask style handler. The context carries the Slack form 'body'
    (user_name, text) and the 'secrets' store. The callback is invoked once,
    always with an empty error argument.
    """
    body = context.get('body') or {}
    command = CommandInput(
        requester_name=format_requester(body.get('user_name', '')),
        raw_text=body.get('text') or '',
    )
    api_key = get_google_api_key(context.get('secrets'))
    callback(None, get_directions(command, api_key=api_key))


if __name__ == '__main__':
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Slack Directions: preview the message sent back for a directions command.")
    parser.add_argument('text', nargs='?', default="Bellevue, WA to Seattle, WA",
                        help="The command text, '<origin> to <destination>'.")
    parser.add_argument('--user', default="slackUsername",
                        help="The Slack user name to greet.")
    parser.add_argument('-v', '--verbose', action='store_true',
                        help="Enable verbose mode to see the exact API calls being made.")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    sample_command = CommandInput(requester_name=format_requester(args.user), raw_text=args.text)
    google_api_key = get_google_api_key(os.environ)
    selected_adapter = GoogleDirectionsAdapter(
        api_key=google_api_key, timeout=get_request_timeout(), verbose=args.verbose)

    slack_message = get_directions(sample_command, adapter=selected_adapter)
    print("Slack Response:\n")
    print(json.dumps(slack_message, indent=2))
