from django.urls import path
from . import views

app_name = 'businesses'

urlpatterns = [
    # GET   /api/businesses/categories/  - Category list
    # POST  /api/businesses/             - Create business (business account)
    # GET   /api/businesses/mine/        - Current user's business
    # PATCH /api/businesses/mine/        - Update current user's business
    path('categories/', views.business_categories, name='categories'),
    path('mine/', views.my_business, name='mine'),
    path('', views.create_business, name='create'),
]
