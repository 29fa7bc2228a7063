# Contains the adapter classes for fetching directions from the Google Directions API.

import logging
import re
import requests
from abc import ABC, abstractmethod
from urllib.parse import urlencode, quote

from directions_structures import DirectionsResult, Step
from slack_messages import (
    MESSAGE_ERROR,
    MESSAGE_NO_RESULTS,
    MESSAGE_NOT_FOUND,
    format_directions_message,
    text_message,
)

logger = logging.getLogger(__name__)

# --- API Configuration ---
GOOGLE_DIRECTIONS_API_URL = "https://maps.googleapis.com/maps/api/directions/json"
GOOGLE_MAPS_DIRECTIONS_URL = "https://www.google.com/maps/dir/"
GOOGLE_API_VERSION = "1"
DEFAULT_TRANSPORT_MODE = "driving"
DEFAULT_TIMEOUT_SEC = 10

STATUS_OK = "OK"
STATUS_ZERO_RESULTS = "ZERO_RESULTS"
STATUS_NOT_FOUND = "NOT_FOUND"
SUMMARY_PREFIX = "via "

HTML_TAG_PATTERN = re.compile(r'<[^>]+>')


def build_request_url(base_url: str, origin: str, destination: str, api_key: str | None = None) -> str:
    """
    Builds a directions URL for the given waypoints.
    With an API key the URL targets the JSON API, without one it gets the
    'api=1' marker that Google Maps expects on shareable links.
    """
    params = {
        'origin': origin,
        'destination': destination,
        'mode': DEFAULT_TRANSPORT_MODE,
    }
    if api_key:
        params['key'] = api_key
    else:
        params['api'] = GOOGLE_API_VERSION
    return f"{base_url}?{urlencode(params, quote_via=quote)}"


def build_map_link(origin: str, destination: str) -> str:
    """A link that opens the same route on the Google Maps website."""
    return build_request_url(GOOGLE_MAPS_DIRECTIONS_URL, origin, destination)


def strip_html(text: str) -> str:
    """Removes every HTML tag, leaving only the plain text."""
    return HTML_TAG_PATTERN.sub('', text or '')


def build_steps(raw_steps: list) -> list[Step]:
    """Converts the steps of a Google leg into our numbered Step objects."""
    return [
        Step(
            index=i,
            text=strip_html(raw_step['html_instructions']),
            duration=raw_step['duration']['text'],
            distance=raw_step['distance']['text'],
        )
        for i, raw_step in enumerate(raw_steps, start=1)
    ]


def build_directions(origin: str, destination: str, data: dict) -> DirectionsResult:
    """
    Extracts the first route of a Google Directions response.
    A response without routes still yields a result carrying the waypoints
    and the map link.
    """
    directions = DirectionsResult(
        origin=origin,
        destination=destination,
        link=build_map_link(origin, destination),
    )
    routes = data.get('routes')
    if routes:
        route = routes[0]
        directions.summary = SUMMARY_PREFIX + route['summary']
        directions.copyright = route.get('copyrights')
        legs = route.get('legs')
        if legs:
            leg = legs[0]
            directions.duration = leg['duration']['text']
            directions.distance = leg['distance']['text']
            directions.steps = build_steps(leg.get('steps') or [])
    return directions


class DirectionsAdapter(ABC):
    """
    Abstract Base Class for directions providers.
    Every adapter answers with a ready-to-send Slack message, never an exception.
    """
    @abstractmethod
    def get_directions(self, requester: str, origin: str, destination: str) -> dict:
        """Fetches directions and returns the Slack message to display."""
        pass


class GoogleDirectionsAdapter(DirectionsAdapter):
    """The adapter for the Google Directions API."""
    DIRECTIONS_URL = GOOGLE_DIRECTIONS_API_URL

    def __init__(self, api_key: str | None = None, timeout: float = DEFAULT_TIMEOUT_SEC, verbose: bool = False):
        self.api_key = api_key
        self.timeout = timeout
        self.verbose = verbose

    def get_directions(self, requester: str, origin: str, destination: str) -> dict:
        url = build_request_url(self.DIRECTIONS_URL, origin, destination, self.api_key)
        if self.verbose:
            # Never log the real key.
            logger.info("[Google] GET %s", build_request_url(
                self.DIRECTIONS_URL, origin, destination, 'REDACTED' if self.api_key else None))
        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
            status = data.get('status')
            if status == STATUS_OK:
                directions = build_directions(origin, destination, data)
                return format_directions_message(requester, directions)
            elif status == STATUS_ZERO_RESULTS:
                return text_message(MESSAGE_NO_RESULTS)
            elif status == STATUS_NOT_FOUND:
                return text_message(MESSAGE_NOT_FOUND)
            else:
                logger.error("[Google] Directions request for '%s' to '%s' failed. Status: %s, message: %s",
                             origin, destination, status, data.get('error_message'))
                return text_message(MESSAGE_ERROR)
        except requests.exceptions.RequestException as e:
            logger.error("[Google] A network error occurred fetching directions: %s", e)
            return text_message(MESSAGE_ERROR)
        except (ValueError, KeyError, IndexError, TypeError, AttributeError) as e:
            logger.error("[Google] Could not parse the directions response for '%s' to '%s': %r",
                         origin, destination, e)
            return text_message(MESSAGE_ERROR)
