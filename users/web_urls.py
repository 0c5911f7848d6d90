from django.contrib.auth import views as auth_views
from django.urls import path

# Browser sign-in/sign-out; names match LOGIN_URL and the layout links
urlpatterns = [
    path('Login', auth_views.LoginView.as_view(redirect_authenticated_user=True), name='login'),
    path('Logout', auth_views.LogoutView.as_view(), name='logout'),
]
