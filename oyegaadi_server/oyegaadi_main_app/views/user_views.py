"""User-related views"""
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.tokens import RefreshToken

from ..models import Profile
from ..serializers import ProfileSerializer, RegisterSerializer
from ..services import UserService


class ProfileView(APIView):
    """Current user's profile; role and verification flags are read-only"""
    permission_classes = [IsAuthenticated]
    authentication_classes = [JWTAuthentication]

    def get(self, request):
        profile = get_object_or_404(Profile.objects.select_related('user'), user=request.user)
        return Response(ProfileSerializer(profile).data)

    def patch(self, request):
        profile = get_object_or_404(Profile, user=request.user)
        serializer = ProfileSerializer(profile, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(serializer.data)


class RegisterView(APIView):
    """Self-service sign-up for customers and drivers; answers with a JWT pair"""
    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = UserService().register_user(**serializer.validated_data)
        return Response({
            'message': 'User registered successfully',
            'profile': ProfileSerializer(user.profile).data,
            **self.get_tokens_for_user(user),
        }, status=status.HTTP_201_CREATED)

    def get_tokens_for_user(self, user):
        refresh = RefreshToken.for_user(user)
        return {
            'refresh': str(refresh),
            'access': str(refresh.access_token)
        }


__all__ = ['ProfileView', 'RegisterView']
