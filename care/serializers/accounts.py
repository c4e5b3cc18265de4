import re

from rest_framework import serializers

from care.models import CarerCertification, CarerProfile, User
from .fields import CleanCharField, LenientDateField, MediaRefField

USERNAME_RE = re.compile(r'^[a-zA-Z0-9_-]+$')
PHONE_RE = re.compile(r'^[+]?[(]?[0-9]{3}[)]?[-\s.]?[0-9]{3}[-\s.]?[0-9]{4,6}$')
TIME_RE = re.compile(r'^([01]\d|2[0-3]):[0-5]\d$')

SELF_REGISTER_ROLES = [User.ROLE_OWNER, User.ROLE_CARER]

PASSWORD_MESSAGES = {
    'required': 'Password must be at least 8 characters',
    'blank': 'Password must be at least 8 characters',
    'min_length': 'Password must be at least 8 characters',
    'max_length': 'Password cannot exceed 100 characters',
}


def check_password_strength(value: str) -> str:
    if not re.search(r'[A-Z]', value):
        raise serializers.ValidationError('Password must contain at least one uppercase letter')
    if not re.search(r'[a-z]', value):
        raise serializers.ValidationError('Password must contain at least one lowercase letter')
    if not re.search(r'[0-9]', value):
        raise serializers.ValidationError('Password must contain at least one number')
    return value


def check_phone(value: str) -> str:
    value = (value or '').strip()
    if value and not PHONE_RE.match(value):
        raise serializers.ValidationError('Please enter a valid phone number')
    return value


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField(required=False, allow_blank=True)
    email = serializers.CharField(required=False, allow_blank=True)
    password = serializers.CharField(error_messages={'required': 'Password is required', 'blank': 'Password is required'})

    def validate(self, attrs):
        account = (attrs.get('username') or attrs.get('email') or '').strip()
        if not account:
            raise serializers.ValidationError({'username': 'Username or email is required'})
        attrs['account'] = account
        return attrs


class RegisterSerializer(serializers.Serializer):
    """Sign-up form for pet owners and pet carers."""
    name = CleanCharField(min_length=2, max_length=50, error_messages={
        'required': 'Name must be at least 2 characters',
        'blank': 'Name must be at least 2 characters',
        'min_length': 'Name must be at least 2 characters',
        'max_length': 'Name cannot exceed 50 characters',
    })
    username = serializers.CharField(min_length=3, max_length=30, error_messages={
        'required': 'Username must be at least 3 characters',
        'blank': 'Username must be at least 3 characters',
        'min_length': 'Username must be at least 3 characters',
        'max_length': 'Username cannot exceed 30 characters',
    })
    email = serializers.EmailField(max_length=100, error_messages={
        'required': 'Please enter a valid email address',
        'blank': 'Please enter a valid email address',
        'invalid': 'Please enter a valid email address',
        'max_length': 'Email cannot exceed 100 characters',
    })
    password = serializers.CharField(min_length=8, max_length=100, trim_whitespace=False, write_only=True,
                                     error_messages=PASSWORD_MESSAGES)
    confirmPassword = serializers.CharField(trim_whitespace=False, write_only=True, allow_blank=True, error_messages={
        'required': 'Passwords do not match',
    })
    phone = serializers.CharField(required=False, allow_blank=True, max_length=32)
    address = CleanCharField(required=False, allow_blank=True)
    bio = CleanCharField(required=False, allow_blank=True)
    roles = serializers.ChoiceField(choices=SELF_REGISTER_ROLES, error_messages={
        'required': 'Please select a valid role',
        'invalid_choice': 'Please select a valid role',
    })
    gdprConsent = serializers.BooleanField(error_messages={
        'required': 'You must accept the GDPR consent to register',
        'invalid': 'You must accept the GDPR consent to register',
    })

    def validate_username(self, v):
        if not USERNAME_RE.match(v):
            raise serializers.ValidationError('Username can only contain letters, numbers, underscores and hyphens')
        if User.objects.filter(username__iexact=v).exists():
            raise serializers.ValidationError('This username is already taken')
        return v

    def validate_email(self, v):
        v = v.strip()
        if User.objects.filter(email__iexact=v).exists():
            raise serializers.ValidationError('An account with this email already exists')
        return v

    def validate_password(self, v):
        return check_password_strength(v)

    def validate_phone(self, v):
        return check_phone(v)

    def validate_gdprConsent(self, v):
        if v is not True:
            raise serializers.ValidationError('You must accept the GDPR consent to register')
        return v

    def validate(self, attrs):
        if attrs['password'] != attrs.get('confirmPassword'):
            raise serializers.ValidationError({'confirmPassword': 'Passwords do not match'})
        return attrs


def validate_registration_form(data):
    """Validate sign-up input.

    Returns ``(success, data, errors)`` where ``errors`` maps each field
    (``form`` for cross-field problems) to its first message.
    """
    s = RegisterSerializer(data=data)
    if s.is_valid():
        return True, dict(s.validated_data), {}
    errors = {}
    for field, messages in s.errors.items():
        key = 'form' if field == 'non_field_errors' else field
        if isinstance(messages, dict):
            messages = [m for msgs in messages.values() for m in msgs]
        errors[key] = str(messages[0]) if messages else 'Validation failed'
    return False, None, errors


class PasswordChangeSerializer(serializers.Serializer):
    currentPassword = serializers.CharField(trim_whitespace=False, error_messages={
        'required': 'Current password is required',
        'blank': 'Current password is required',
    })
    newPassword = serializers.CharField(min_length=8, max_length=100, trim_whitespace=False,
                                        error_messages=PASSWORD_MESSAGES)
    confirmPassword = serializers.CharField(trim_whitespace=False, allow_blank=True)

    def validate_newPassword(self, v):
        return check_password_strength(v)

    def validate(self, attrs):
        if attrs['newPassword'] != attrs.get('confirmPassword'):
            raise serializers.ValidationError({'confirmPassword': 'Passwords do not match'})
        return attrs


class CarerProfileSerializer(serializers.ModelSerializer):
    availableDays = serializers.ListField(
        child=serializers.ChoiceField(choices=[d for d, _ in CarerProfile.DAY_CHOICES]),
        source='available_days', required=False,
    )
    startTime = serializers.CharField(source='start_time', required=False, allow_blank=True)
    endTime = serializers.CharField(source='end_time', required=False, allow_blank=True)
    notes = CleanCharField(required=False, allow_blank=True)
    rating = serializers.FloatField(read_only=True)
    completedJobs = serializers.IntegerField(source='completed_jobs', read_only=True)
    specialties = serializers.ListField(
        child=serializers.ChoiceField(choices=[s for s, _ in CarerProfile.SPECIALTY_CHOICES]),
        required=False,
    )

    class Meta:
        model = CarerProfile
        fields = ['availableDays', 'startTime', 'endTime', 'notes', 'rating', 'completedJobs', 'specialties']

    def _check_time(self, v):
        if v and not TIME_RE.match(v):
            raise serializers.ValidationError('Use HH:MM (24h) format')
        return v

    def validate_startTime(self, v):
        return self._check_time(v)

    def validate_endTime(self, v):
        return self._check_time(v)


class CertificationSerializer(serializers.ModelSerializer):
    certificationType = CleanCharField(source='certification_type', max_length=255, error_messages={
        'required': 'Certification type is required',
        'blank': 'Certification type is required',
    })
    issuer = CleanCharField(required=False, allow_blank=True, max_length=255)
    issueDate = LenientDateField(source='issue_date')
    expiryDate = LenientDateField(source='expiry_date')
    certificate = MediaRefField(required=False, allow_null=True)

    class Meta:
        model = CarerCertification
        fields = ['id', 'certificationType', 'issuer', 'issueDate', 'expiryDate', 'certificate']


class PetSummarySerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    species = serializers.CharField()
    breed = serializers.CharField()
    photo = MediaRefField()


class UserSerializer(serializers.ModelSerializer):
    roles = serializers.CharField(source='role', read_only=True)
    avatar = MediaRefField(read_only=True)
    createdAt = serializers.DateTimeField(source='date_joined', read_only=True)

    class Meta:
        model = User
        fields = ['id', 'username', 'email', 'name', 'roles', 'phone', 'address', 'bio', 'avatar', 'createdAt']

    def to_representation(self, instance):
        data = super().to_representation(instance)
        if instance.role == User.ROLE_CARER:
            profile = getattr(instance, 'carer_profile', None)
            data['availability'] = CarerProfileSerializer(profile).data if profile else None
            data['certifications'] = CertificationSerializer(
                instance.certifications.all(), many=True, context=self.context
            ).data
        return data


class MeSerializer(UserSerializer):
    """Current user with owned and cared pets expanded."""

    def to_representation(self, instance):
        data = super().to_representation(instance)
        data['ownedPets'] = PetSummarySerializer(
            instance.owned_pets.select_related('photo').order_by('name'), many=True, context=self.context
        ).data
        data['caredPets'] = PetSummarySerializer(
            instance.cared_pets.select_related('photo').order_by('name'), many=True, context=self.context
        ).data
        return data


class UserUpdateSerializer(serializers.Serializer):
    name = CleanCharField(required=False, min_length=2, max_length=50, error_messages={
        'blank': 'Name must be at least 2 characters',
        'min_length': 'Name must be at least 2 characters',
        'max_length': 'Name cannot exceed 50 characters',
    })
    email = serializers.EmailField(required=False, max_length=100, error_messages={
        'invalid': 'Please enter a valid email address',
        'max_length': 'Email cannot exceed 100 characters',
    })
    phone = serializers.CharField(required=False, allow_blank=True, max_length=32)
    address = CleanCharField(required=False, allow_blank=True)
    bio = CleanCharField(required=False, allow_blank=True)
    avatar = MediaRefField(required=False, allow_null=True)
    roles = serializers.ChoiceField(choices=[r for r, _ in User.ROLE_CHOICES], required=False)
    availability = CarerProfileSerializer(required=False)
    certifications = CertificationSerializer(many=True, required=False)

    def validate_phone(self, v):
        return check_phone(v)

    def validate_email(self, v):
        v = v.strip()
        qs = User.objects.filter(email__iexact=v)
        if self.instance is not None:
            qs = qs.exclude(pk=self.instance.pk)
        if qs.exists():
            raise serializers.ValidationError('An account with this email already exists')
        return v
