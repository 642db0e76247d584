from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from .models import User, UserRole, Language


class UserSerializer(serializers.ModelSerializer):
    """Basic user serializer for profile display."""

    class Meta:
        model = User
        fields = [
            'id',
            'email',
            'display_name',
            'role',
            'language',
            'created_at',
            'last_login',
        ]
        read_only_fields = ['id', 'email', 'role', 'created_at', 'last_login']


class UserRegistrationSerializer(serializers.Serializer):
    """Validate user registration input."""

    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        write_only=True,
        required=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    password_confirm = serializers.CharField(
        write_only=True,
        required=True,
        style={'input_type': 'password'}
    )
    display_name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    language = serializers.ChoiceField(choices=Language.choices, required=False, default=Language.ENGLISH)

    def validate(self, attrs):
        """Validate password confirmation."""
        if attrs['password'] != attrs['password_confirm']:
            raise serializers.ValidationError({
                'password_confirm': 'Passwords do not match'
            })
        return attrs


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )


class RoleChangeSerializer(serializers.Serializer):
    """Validate a role change request."""

    role = serializers.ChoiceField(choices=UserRole.choices)


class UserPublicSerializer(serializers.ModelSerializer):
    """Public user info (for displaying who recorded what)."""

    class Meta:
        model = User
        fields = ['id', 'display_name', 'role']
        read_only_fields = fields
