from django.urls import path
from . import views

urlpatterns = [
    path('', views.record_event, name='record_event'),
]
