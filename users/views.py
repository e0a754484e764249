# users/views.py
from rest_framework import generics, status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from django.contrib.auth import get_user_model
from drf_spectacular.utils import extend_schema
from rest_framework_simplejwt.tokens import RefreshToken
from .serializers import CustomUserSerializer, RegisterSerializer
import logging

logger = logging.getLogger(__name__)

CustomUser = get_user_model()


class RegisterView(generics.CreateAPIView):
    serializer_class = RegisterSerializer
    permission_classes = [AllowAny]

    @extend_schema(
        description="Create a member account and return a JWT pair",
        summary="Register",
        tags=["Auth"],
    )
    def post(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()

        refresh = RefreshToken.for_user(user)
        return Response(
            {
                "user": CustomUserSerializer(user).data,
                "refresh": str(refresh),
                "access": str(refresh.access_token),
            },
            status=status.HTTP_201_CREATED,
        )


class CurrentUserView(generics.RetrieveUpdateAPIView):
    """Current session context: who is logged in and with which role"""

    serializer_class = CustomUserSerializer
    permission_classes = [IsAuthenticated]
    http_method_names = ["get", "patch", "head", "options"]

    def get_object(self):
        return self.request.user

    @extend_schema(
        description="Get the authenticated user's profile, role and anonymous id",
        summary="Current User",
        tags=["Auth"],
    )
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)

    @extend_schema(
        description="Update the authenticated user's display name",
        summary="Update Current User",
        tags=["Auth"],
    )
    def patch(self, request, *args, **kwargs):
        response = super().patch(request, *args, **kwargs)
        logger.info(f"Updated profile for user {request.user.id}")
        return response
