from rest_framework import serializers

from care.models import DailyCare, Pet, User
from .fields import CleanCharField, MediaRefField, OptionalNumberField


class FeedingSerializer(serializers.Serializer):
    foodType = CleanCharField(source='food_type', required=False, allow_blank=True, max_length=255)
    dailyQuantity = CleanCharField(source='daily_quantity', required=False, allow_blank=True, max_length=255)
    frequency = CleanCharField(source='feeding_frequency', required=False, allow_blank=True, max_length=255)
    specialNeeds = CleanCharField(source='special_needs', required=False, allow_blank=True)


class HygieneSerializer(serializers.Serializer):
    bathFrequency = CleanCharField(source='bath_frequency', required=False, allow_blank=True, max_length=255)
    brushFrequency = CleanCharField(source='brush_frequency', required=False, allow_blank=True, max_length=255)
    dentalCleaningFrequency = CleanCharField(source='dental_cleaning_frequency', required=False, allow_blank=True, max_length=255)
    cleaningEars = CleanCharField(source='ear_cleaning', required=False, allow_blank=True, max_length=255)
    cuttingNails = CleanCharField(source='nail_cutting', required=False, allow_blank=True, max_length=255)
    notes = CleanCharField(source='hygiene_notes', required=False, allow_blank=True)


class ExerciseSerializer(serializers.Serializer):
    excerciseType = CleanCharField(source='exercise_type', required=False, allow_blank=True, max_length=255)
    duration = CleanCharField(source='exercise_duration', required=False, allow_blank=True, max_length=255)
    frequency = CleanCharField(source='exercise_frequency', required=False, allow_blank=True, max_length=255)
    observations = CleanCharField(source='exercise_observations', required=False, allow_blank=True)


class DailyCareSerializer(serializers.ModelSerializer):
    """Flat ``DailyCare`` row exposed as feeding / hygiene / exercise groups."""
    feeding = FeedingSerializer(source='*', required=False)
    hygiene = HygieneSerializer(source='*', required=False)
    exercise = ExerciseSerializer(source='*', required=False)

    class Meta:
        model = DailyCare
        fields = ['feeding', 'hygiene', 'exercise']


class PetSerializer(serializers.ModelSerializer):
    photo = MediaRefField(error_messages={'required': 'Photo is required', 'null': 'Photo is required'})
    name = CleanCharField(min_length=2, max_length=50, error_messages={
        'required': 'Pet name is required',
        'blank': 'Pet name is required',
        'min_length': 'Name must be at least 2 characters',
        'max_length': 'Name cannot exceed 50 characters',
    })
    species = serializers.ChoiceField(choices=Pet.SPECIES_CHOICES, error_messages={
        'required': 'Please select a valid species',
        'invalid_choice': 'Please select a valid species',
    })
    breed = CleanCharField(required=False, allow_blank=True, max_length=50, error_messages={
        'max_length': 'Breed cannot exceed 50 characters',
    })
    sex = serializers.ChoiceField(choices=Pet.SEX_CHOICES, required=False, allow_blank=True, error_messages={
        'invalid_choice': 'Sex must be either male or female',
    })
    age = OptionalNumberField(error_messages={'invalid': 'Age must be a valid number'})
    height = OptionalNumberField(min_value=0)
    weight = OptionalNumberField(min_value=0)
    petOwner = serializers.PrimaryKeyRelatedField(source='pet_owner', queryset=User.objects.all(), required=False)
    petCarer = serializers.PrimaryKeyRelatedField(source='pet_carer', queryset=User.objects.all(),
                                                  required=False, allow_null=True)
    qrLink = serializers.CharField(source='qr_link', required=False, allow_blank=True, max_length=500)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Pet
        fields = ['id', 'name', 'species', 'breed', 'sex', 'age', 'height', 'weight', 'photo',
                  'petOwner', 'petCarer', 'qrLink', 'createdAt', 'updatedAt']

    def validate_age(self, v):
        if v is not None and v <= 0:
            raise serializers.ValidationError('Age must be a positive number')
        return v

    def validate_petCarer(self, v):
        if v is not None and v.role != User.ROLE_CARER:
            raise serializers.ValidationError('Selected user is not a pet carer')
        return v


class PetDetailSerializer(PetSerializer):
    """Pet with its daily care routine."""
    dailyCare = serializers.SerializerMethodField()

    class Meta(PetSerializer.Meta):
        fields = PetSerializer.Meta.fields + ['dailyCare']

    def get_dailyCare(self, obj):
        care = getattr(obj, 'daily_care', None)
        return DailyCareSerializer(care if care is not None else DailyCare(pet=obj)).data


class PetListQuerySerializer(serializers.Serializer):
    species = serializers.ChoiceField(choices=Pet.SPECIES_CHOICES, required=False)
    q = serializers.CharField(max_length=64, required=False)
    page = serializers.IntegerField(min_value=1, required=False)
    limit = serializers.IntegerField(min_value=1, max_value=200, required=False)
