import time

from django.conf import settings
from django.http import StreamingHttpResponse
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes, renderer_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.renderers import JSONRenderer
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse
from drf_spectacular.types import OpenApiTypes
from loguru import logger

from apps.credits.services import InsufficientCreditError
from apps.matches.services import (
    get_match_for_user,
    MatchNotFoundError,
    NotMatchOwnerError,
)
from .renderers import EventStreamRenderer
from .serializers import MessageSerializer, SendMessageSerializer
from .services import (
    send_message,
    send_admin_reply,
    list_messages,
    list_messages_after,
    subscribe,
    # Exceptions
    EmptyMessageError,
    InsufficientPermissionsError,
)


@extend_schema(
    methods=['GET'],
    responses={200: MessageSerializer(many=True)},
    description="Full conversation for a match, oldest first.",
    tags=['messages'],
)
@extend_schema(
    methods=['POST'],
    request=SendMessageSerializer,
    responses={
        201: MessageSerializer,
        402: OpenApiResponse(description='No credits remaining'),
    },
    description="Send a message. Costs one credit.",
    tags=['messages'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def conversation(request, match_id):
    """List or send messages - thin HTTP handler."""
    if request.method == 'GET':
        try:
            messages = list_messages(match_id=match_id, user=request.user)
        except MatchNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except NotMatchOwnerError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        return Response(MessageSerializer(messages, many=True).data)

    serializer = SendMessageSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        message = send_message(
            match_id=match_id,
            sender=request.user,
            content=serializer.validated_data['content'],
        )
    except EmptyMessageError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except MatchNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except NotMatchOwnerError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
    except InsufficientCreditError as e:
        return Response({'error': str(e)}, status=status.HTTP_402_PAYMENT_REQUIRED)

    return Response(MessageSerializer(message).data, status=status.HTTP_201_CREATED)


@extend_schema(
    request=SendMessageSerializer,
    responses={201: MessageSerializer},
    description="Operator reply on behalf of the matched profile (admin only, free).",
    tags=['messages'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def admin_reply(request, match_id):
    serializer = SendMessageSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        message = send_admin_reply(
            match_id=match_id,
            admin=request.user,
            content=serializer.validated_data['content'],
        )
    except EmptyMessageError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except InsufficientPermissionsError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
    except MatchNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(MessageSerializer(message).data, status=status.HTTP_201_CREATED)


class ConversationEventStream:
    """
    Server-sent event body for one conversation.

    The subscription is opened before the response is returned, so
    messages committed before the client's first read are still sent.
    Django calls ``close()`` when the response is closed.
    """

    def __init__(self, match, *, last_event_id=None, heartbeat, lifetime):
        self.match = match
        self.heartbeat = heartbeat
        self.lifetime = lifetime
        self.subscription = subscribe(match.id)
        self.backlog = []
        if last_event_id is not None:
            self.backlog = list_messages_after(match=match, after_id=last_event_id)
        self.renderer = JSONRenderer()

    def _event(self, message):
        payload = self.renderer.render(MessageSerializer(message).data).decode('utf-8')
        return f"id: {message.id}\nevent: message\ndata: {payload}\n\n"

    def __iter__(self):
        deadline = time.monotonic() + self.lifetime
        replayed = {message.id for message in self.backlog}
        try:
            yield ': connected\n\n'
            for message in self.backlog:
                yield self._event(message)

            while time.monotonic() < deadline:
                message = self.subscription.get(timeout=self.heartbeat)
                if message is None:
                    yield ': heartbeat\n\n'
                    continue
                # Already replayed from the backlog
                if message.id in replayed:
                    continue
                yield self._event(message)
        finally:
            self.close()

        logger.debug(f"Stream for match {self.match.id} reached its lifetime")

    def close(self):
        self.subscription.close()


def _last_event_id(request):
    value = request.headers.get('Last-Event-ID', '').strip()
    if not value.isdigit():
        return None
    return int(value)


@extend_schema(
    parameters=[
        OpenApiParameter(
            'Last-Event-ID',
            OpenApiTypes.INT,
            location=OpenApiParameter.HEADER,
            required=False,
            description='Replay messages stored after this message id',
        ),
    ],
    responses={200: OpenApiResponse(description='text/event-stream of new messages')},
    description="Server-sent events for messages committed to the conversation after connecting.",
    tags=['messages'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
@renderer_classes([EventStreamRenderer, JSONRenderer])
def conversation_stream(request, match_id):
    try:
        match = get_match_for_user(match_id=match_id, user=request.user)
    except MatchNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except NotMatchOwnerError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    stream = ConversationEventStream(
        match,
        last_event_id=_last_event_id(request),
        heartbeat=settings.REALTIME_HEARTBEAT_SECONDS,
        lifetime=settings.REALTIME_STREAM_SECONDS,
    )
    response = StreamingHttpResponse(stream, content_type='text/event-stream')
    response['Cache-Control'] = 'no-cache'
    response['X-Accel-Buffering'] = 'no'
    return response
