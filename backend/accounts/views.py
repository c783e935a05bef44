from django.contrib.auth import authenticate
from rest_framework import serializers, status
from rest_framework.authtoken.models import Token
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField(trim_whitespace=False)


def _session_payload(user, token=None):
    payload = {
        'username': user.username,
        'email': user.email,
        'full_name': user.get_full_name(),
        'phone': user.phone,
        'role': user.role,
    }
    if token is not None:
        payload['token'] = token.key
    return payload


@api_view(['POST'])
@permission_classes([AllowAny])
def login_view(request):
    """Exchange username/password for an API token."""
    ser = LoginSerializer(data=request.data)
    ser.is_valid(raise_exception=True)

    user = authenticate(
        username=ser.validated_data['username'],
        password=ser.validated_data['password'],
    )
    if not user:
        return Response({'error': 'Invalid credentials'}, status=status.HTTP_401_UNAUTHORIZED)
    if not user.can_log_in:
        return Response({'error': 'User pending approval'}, status=status.HTTP_401_UNAUTHORIZED)

    token, _ = Token.objects.get_or_create(user=user)
    return Response(_session_payload(user, token), status=status.HTTP_200_OK)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def me_view(request):
    return Response(_session_payload(request.user))
