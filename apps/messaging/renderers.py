import json

from rest_framework.renderers import BaseRenderer


class EventStreamRenderer(BaseRenderer):
    """
    Lets clients negotiate ``text/event-stream``.

    The stream itself is written by the view; this renderer only
    handles error bodies returned before streaming starts.
    """

    media_type = 'text/event-stream'
    format = 'event-stream'
    charset = 'utf-8'

    def render(self, data, accepted_media_type=None, renderer_context=None):
        if data is None:
            return b''
        if isinstance(data, (bytes, str)):
            return data
        return json.dumps(data, default=str).encode(self.charset)
