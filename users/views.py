import logging
from rest_framework import generics, status
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated, AllowAny
from rest_framework_simplejwt.tokens import RefreshToken
from django.conf import settings
from django.db.models import Q
from .models import User
from .serializers import (
    RegisterSerializer, LoginSerializer, UserSerializer, UserUpdateSerializer,
    UserListSerializer, VerifyPhoneSerializer,
)

logger = logging.getLogger(__name__)


class RegisterView(generics.CreateAPIView):
    serializer_class = RegisterSerializer
    permission_classes = [AllowAny]

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info(f'User {user.id} registered')
        tokens = RefreshToken.for_user(user)
        return Response({
            'access': str(tokens.access_token),
            'refresh': str(tokens),
            'user': UserSerializer(user).data
        }, status=status.HTTP_201_CREATED)


class LoginView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return Response(serializer.validated_data)


class ProfileView(generics.RetrieveUpdateAPIView):
    permission_classes = [IsAuthenticated]

    def get_serializer_class(self):
        if self.request.method in ['PUT', 'PATCH']:
            return UserUpdateSerializer
        return UserSerializer

    def get_object(self):
        return self.request.user

    def update(self, request, *args, **kwargs):
        kwargs['partial'] = True
        return super().update(request, *args, **kwargs)


class VerifyPhoneView(APIView):
    """
    Phone verification.

    With PHONE_AUTO_VERIFY the number is verified immediately. Otherwise a
    request without a code issues one, and a request with a code checks it.
    """
    permission_classes = [IsAuthenticated]

    def post(self, request):
        user = request.user
        if not user.phone:
            return Response({'error': 'No phone number on account'}, status=400)
        if user.has_verified_phone:
            return Response({'status': 'verified'})

        if settings.PHONE_AUTO_VERIFY:
            user.call_to_verify()
            return Response({'status': 'verified'})

        serializer = VerifyPhoneSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        code = serializer.validated_data.get('code')

        if not code:
            user.issue_verification_code()
            logger.info(f'Verification code issued for user {user.id}')
            return Response({'status': 'code_sent', 'expires_at': user.verification_code_expiry})

        if code != user.verification_code or not user.mark_phone_as_verified():
            return Response({'error': 'Invalid or expired code'}, status=400)
        return Response({'status': 'verified'})


class UserDirectoryView(generics.ListAPIView):
    serializer_class = UserListSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        qs = User.objects.alive().exclude(id=self.request.user.id).order_by('id')
        search = self.request.query_params.get('search')
        if search:
            qs = qs.filter(Q(name__icontains=search) | Q(username__icontains=search))
        return qs

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context['viewer'] = self.request.user
        return context
