from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'deals'

# Router for ViewSets
router = DefaultRouter()
router.register(r'manage', views.BusinessDealViewSet, basename='business-deal')
router.register(r'', views.DealViewSet, basename='deal')

urlpatterns = [
    # Deal manager routes (business owner)
    # GET    /api/deals/manage/                  - List own deals
    # POST   /api/deals/manage/                  - Publish deal
    # POST   /api/deals/manage/{id}/set_active/  - Activate/deactivate deal

    # Catalog routes (public)
    # GET    /api/deals/                         - Active deals (search, category)
    # GET    /api/deals/{id}/                    - Deal detail

    # Favorites
    path('favorites/', views.favorites, name='favorites'),
    path('favorites/ids/', views.favorite_ids, name='favorite-ids'),
    path('favorites/toggle/', views.toggle_favorite_view, name='favorite-toggle'),
    path('favorites/<uuid:deal_id>/', views.remove_favorite_view, name='favorite-remove'),

    # Include router URLs
    path('', include(router.urls)),
]
