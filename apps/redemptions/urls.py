from django.urls import path
from . import views

app_name = 'redemptions'

urlpatterns = [
    # Customer side
    path('request/', views.request_code, name='request'),
    path('history/', views.redemption_history, name='history'),
    path('<uuid:redemption_id>/qr/', views.redemption_qr, name='qr'),

    # Business scanner
    path('verify/', views.verify_code, name='verify'),
    path('<uuid:redemption_id>/finalize/', views.finalize_redemption, name='finalize'),
]
