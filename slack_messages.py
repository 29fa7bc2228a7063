# Builds the Slack message payloads returned by the directions command.

from directions_structures import DirectionsResult, Step

# --- Slack Attachment Configuration ---
SLACK_COLOR = "#36a64f"
AUTHOR_NAME = "Google Maps"
AUTHOR_LINK_URL = "https://www.google.com/maps"
AUTHOR_ICON_URL = "https://www.google.com/images/branding/product/2x/maps_48dp.png"
FOOTER_ICON_URL = ""

# --- User Facing Messages ---
MESSAGE_NO_RESULTS = "Sorry, I couldn't find any directions"
MESSAGE_NOT_FOUND = ("Sorry, I didn't find any matching locations. "
                     "Try the name or entering the full address")
MESSAGE_ERROR = "Google has been put in timeout. Please try again later"

USAGE_COLOR = "warning"
USAGE_FALLBACK = ":frowning: Sorry I couldn't understand that. Please try again"
USAGE_PRETEXT = "Sorry I couldn't understand that. Let me help you out..."
USAGE_TEXT = "/wt directions <origin> to <destination>"
USAGE_EXAMPLE = "/wt directions Bellevue, WA to Seattle, WA"


def text_message(text: str) -> dict:
    """Wraps a plain notice in a Slack message."""
    return {'text': text}


def usage_message() -> dict:
    """The attachment shown when the command text could not be parsed."""
    return {
        'attachments': [{
            'fallback': USAGE_FALLBACK,
            'color': USAGE_COLOR,
            'pretext': USAGE_PRETEXT,
            'author_name': 'Usage',
            'text': USAGE_TEXT,
            'fields': [{
                'title': 'Example',
                'value': USAGE_EXAMPLE,
                'short': False
            }]
        }]
    }


def format_step_fields(steps: list[Step]) -> list[dict]:
    """Creates one attachment field per step, keeping the order of the route."""
    return [
        {
            'title': step.text,
            'value': f"{step.duration} ({step.distance})",
            'short': False
        }
        for step in steps
    ]


def format_directions_message(requester: str, directions: DirectionsResult) -> dict:
    """
    Formats the directions as a single rich Slack attachment.
    The requester is greeted by name, the title links through to Google Maps
    and every step becomes a field.
    """
    pretext = f"Okay {requester}. Here are your directions..."
    return {
        'attachments': [{
            'fallback': pretext,
            'color': SLACK_COLOR,
            'pretext': pretext,
            'author_name': AUTHOR_NAME,
            'author_link': AUTHOR_LINK_URL,
            'author_icon': AUTHOR_ICON_URL,
            'title': directions.summary,
            'title_link': directions.link,
            'text': f"{directions.duration} ({directions.distance})",
            'fields': format_step_fields(directions.steps),
            'footer': directions.copyright,
            'footer_icon': FOOTER_ICON_URL
        }]
    }
