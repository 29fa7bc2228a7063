from directions_structures import DirectionsResult, Step
from slack_messages import (
    AUTHOR_NAME,
    SLACK_COLOR,
    USAGE_TEXT,
    format_directions_message,
    format_step_fields,
    text_message,
    usage_message,
)


def make_directions():
    return DirectionsResult(
        origin="Bellevue, WA",
        destination="Seattle, WA",
        link="https://www.google.com/maps/dir/?origin=Bellevue&destination=Seattle&mode=driving&api=1",
        summary="via I-90 W",
        copyright="Map data ©2024 Google",
        duration="15 mins",
        distance="10.2 mi",
        steps=[
            Step(index=1, text="Head west", duration="1 min", distance="0.2 mi"),
            Step(index=2, text="Merge onto I-90 W", duration="12 mins", distance="9.8 mi"),
            Step(index=3, text="Head west", duration="1 min", distance="0.2 mi"),
        ],
    )


class TestFormatDirectionsMessage:

    def test_attachment_fields(self):
        message = format_directions_message("<@alice>", make_directions())

        assert list(message) == ['attachments']
        attachment = message['attachments'][0]
        assert attachment['pretext'] == "Okay <@alice>. Here are your directions..."
        assert attachment['fallback'] == attachment['pretext']
        assert attachment['color'] == SLACK_COLOR
        assert attachment['author_name'] == AUTHOR_NAME
        assert attachment['title'] == "via I-90 W"
        assert attachment['title_link'].startswith("https://www.google.com/maps/dir/")
        assert attachment['text'] == "15 mins (10.2 mi)"
        assert attachment['footer'] == "Map data ©2024 Google"

    def test_one_field_per_step_in_order(self):
        fields = format_step_fields(make_directions().steps)
        assert [f['title'] for f in fields] == ["Head west", "Merge onto I-90 W", "Head west"]
        assert fields[1] == {'title': "Merge onto I-90 W", 'value': "12 mins (9.8 mi)", 'short': False}

    def test_no_steps_gives_no_fields(self):
        directions = DirectionsResult(origin="A", destination="B", link="x")
        message = format_directions_message("<@bob>", directions)
        assert message['attachments'][0]['fields'] == []
        assert message['attachments'][0]['title'] is None


class TestFixedMessages:

    def test_usage_message(self):
        attachment = usage_message()['attachments'][0]
        assert attachment['color'] == 'warning'
        assert attachment['author_name'] == 'Usage'
        assert attachment['text'] == USAGE_TEXT
        assert attachment['fields'][0]['value'] == "/wt directions Bellevue, WA to Seattle, WA"

    def test_usage_message_is_not_shared(self):
        first = usage_message()
        first['attachments'][0]['text'] = "changed"
        assert usage_message()['attachments'][0]['text'] == USAGE_TEXT

    def test_text_message(self):
        assert text_message("hello") == {'text': "hello"}
