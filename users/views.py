import logging

from rest_framework import status, generics, permissions
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken
from django.contrib.auth import authenticate, get_user_model
from django.utils.decorators import method_decorator
from django_ratelimit.decorators import ratelimit
from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiExample
from .serializers import (
    UserRegistrationSerializer,
    UserLoginSerializer,
    UserSerializer,
)

User = get_user_model()

logger = logging.getLogger(__name__)


def _token_pair(user):
    refresh = RefreshToken.for_user(user)
    return {
        'refresh': str(refresh),
        'access': str(refresh.access_token),
    }


@extend_schema(
    tags=['Authentication'],
    summary='Register new user',
    description='Register a new user account and return a JWT pair.',
    examples=[
        OpenApiExample(
            'Registration',
            value={
                'email': 'user@example.com',
                'password': 'securepassword123',
                'password2': 'securepassword123',
                'first_name': 'John',
                'last_name': 'Doe',
            }
        )
    ]
)
@method_decorator(ratelimit(key='ip', rate='5/m', method='POST'), name='dispatch')
class UserRegistrationView(generics.CreateAPIView):
    """
    Register a new user account
    Rate limited to 5 registrations per minute per IP
    """
    queryset = User.objects.all()
    serializer_class = UserRegistrationSerializer
    permission_classes = [permissions.AllowAny]

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info("Registered user %s", user.email)

        return Response({
            'message': 'User registered successfully',
            'user': UserSerializer(user).data,
            'tokens': _token_pair(user),
        }, status=status.HTTP_201_CREATED)


@extend_schema(
    tags=['Authentication'],
    summary='User login',
    description='Authenticate user and return JWT tokens.',
    examples=[
        OpenApiExample(
            'Login Example',
            value={
                'email': 'user@example.com',
                'password': 'password123'
            }
        )
    ]
)
@method_decorator(ratelimit(key='ip', rate='10/m', method='POST'), name='dispatch')
class UserLoginView(APIView):
    """
    Login user and return JWT tokens
    Rate limited to 10 login attempts per minute per IP
    """
    permission_classes = [permissions.AllowAny]
    serializer_class = UserLoginSerializer

    def post(self, request):
        serializer = UserLoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        email = serializer.validated_data['email'].lower().strip()
        password = serializer.validated_data['password']

        user = authenticate(request, email=email, password=password)

        if user is None:
            logger.warning("Failed login for %s", email)
            return Response(
                {'error': 'Invalid credentials'},
                status=status.HTTP_401_UNAUTHORIZED
            )

        return Response({
            'message': 'Login successful',
            'user': UserSerializer(user).data,
            'tokens': _token_pair(user),
        }, status=status.HTTP_200_OK)


@extend_schema(
    tags=['Authentication'],
    summary='User logout',
    description='Logout user by blacklisting the refresh token',
    request={
        'application/json': {
            'type': 'object',
            'properties': {
                'refresh_token': {
                    'type': 'string',
                    'description': 'JWT refresh token to blacklist'
                }
            },
            'required': ['refresh_token']
        }
    }
)
class UserLogoutView(APIView):
    """
    Logout user by blacklisting the refresh token
    """
    permission_classes = [permissions.IsAuthenticated]

    def post(self, request):
        refresh_token = request.data.get('refresh_token')
        if not refresh_token:
            return Response(
                {'error': 'Refresh token is required'},
                status=status.HTTP_400_BAD_REQUEST
            )

        try:
            RefreshToken(refresh_token).blacklist()
        except TokenError:
            return Response(
                {'error': 'Invalid token or token already blacklisted'},
                status=status.HTTP_400_BAD_REQUEST
            )

        return Response(
            {'message': 'Logout successful'},
            status=status.HTTP_200_OK
        )


@extend_schema_view(
    get=extend_schema(
        tags=['Authentication'],
        summary='Get user profile',
        description='Get the authenticated user\'s profile information',
    ),
    put=extend_schema(
        tags=['Authentication'],
        summary='Update user profile',
        description='Update the authenticated user\'s name',
    ),
    patch=extend_schema(
        tags=['Authentication'],
        summary='Partially update user profile',
        description='Partially update the authenticated user\'s name',
    ),
)
class UserProfileView(generics.RetrieveUpdateAPIView):
    """
    Get or update user profile
    """
    serializer_class = UserSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_object(self):
        return self.request.user
