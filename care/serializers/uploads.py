from rest_framework import serializers

from care.models import Document, Media
from .fields import CleanCharField


class MediaUploadSerializer(serializers.Serializer):
    file = serializers.FileField(allow_empty_file=False, error_messages={
        'required': 'Photo is required',
        'empty': 'Photo file cannot be empty',
    })
    alt = CleanCharField(required=False, allow_blank=True, max_length=255)


class MediaSerializer(serializers.ModelSerializer):
    url = serializers.SerializerMethodField()
    mimeType = serializers.CharField(source='content_type', read_only=True)

    class Meta:
        model = Media
        fields = ['id', 'url', 'alt', 'mimeType', 'size']

    def get_url(self, obj):
        request = self.context.get('request')
        return request.build_absolute_uri(obj.file.url) if request is not None else obj.file.url


class DocumentUploadSerializer(serializers.Serializer):
    file = serializers.FileField(allow_empty_file=False, error_messages={
        'required': 'File is required',
        'empty': 'File cannot be empty',
    })
    title = CleanCharField(required=False, allow_blank=True, max_length=255)
    description = CleanCharField(required=False, allow_blank=True)
    category = CleanCharField(required=False, allow_blank=True, max_length=100)


class DocumentSerializer(serializers.ModelSerializer):
    title = CleanCharField(max_length=255, required=False)
    description = CleanCharField(required=False, allow_blank=True)
    category = CleanCharField(required=False, allow_blank=True, max_length=100)
    url = serializers.SerializerMethodField()
    mimeType = serializers.CharField(source='content_type', read_only=True)
    filename = serializers.CharField(read_only=True)
    size = serializers.IntegerField(read_only=True)
    uploadedBy = serializers.IntegerField(source='uploaded_by_id', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Document
        fields = ['id', 'title', 'description', 'category', 'url', 'filename', 'mimeType', 'size',
                  'uploadedBy', 'createdAt', 'updatedAt']

    def get_url(self, obj):
        request = self.context.get('request')
        return request.build_absolute_uri(obj.file.url) if request is not None else obj.file.url
