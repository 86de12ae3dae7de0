from django.urls import path
from . import views

urlpatterns = [
    path('smart-generate/segment/', views.smart_generate_segment, name='smart_generate_segment'),
    path('smart-draft/email/', views.smart_draft_email, name='smart_draft_email'),
]
