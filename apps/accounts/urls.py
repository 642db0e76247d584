from django.urls import path
from . import views

app_name = 'users'

urlpatterns = [
    # Authentication
    path('register/', views.register, name='register'),
    path('login/', views.login, name='login'),

    # User profile
    path('user/', views.get_current_user, name='current-user'),
    path('user/update/', views.update_profile, name='update-profile'),

    # Farm staff management (owners)
    path('users/', views.UserListView.as_view(), name='user-list'),
    path('users/<uuid:pk>/role/', views.change_role, name='change-role'),
]
