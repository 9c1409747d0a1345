from django.urls import path
from . import views

app_name = 'messaging'

urlpatterns = [
    # GET  /api/messages/matches/{id}/         - Conversation history
    # POST /api/messages/matches/{id}/         - Send message (1 credit)
    # POST /api/messages/matches/{id}/reply/   - Operator reply
    # GET  /api/messages/matches/{id}/stream/  - Live feed (SSE)
    path('matches/<uuid:match_id>/', views.conversation, name='conversation'),
    path('matches/<uuid:match_id>/reply/', views.admin_reply, name='admin-reply'),
    path('matches/<uuid:match_id>/stream/', views.conversation_stream, name='conversation-stream'),
]
