from django.urls import path
from . import views

app_name = 'analytics'

urlpatterns = [
    # Business dashboard
    path('business/', views.business_overview, name='business-overview'),
]
