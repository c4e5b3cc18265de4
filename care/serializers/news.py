from rest_framework import serializers

from care.models import News, User
from .fields import CleanCharField, MediaRefField, clean_html


class NewsSerializer(serializers.ModelSerializer):
    title = CleanCharField(max_length=255, error_messages={
        'required': 'Title is required',
        'blank': 'Title is required',
    })
    slug = serializers.SlugField(max_length=255, required=False, allow_blank=True)
    image = MediaRefField(error_messages={'required': 'Image is required', 'null': 'Image is required'})
    content = serializers.CharField(error_messages={
        'required': 'Content is required',
        'blank': 'Content is required',
    })
    status = serializers.ChoiceField(choices=News.STATUS_CHOICES, required=False)
    publishedAt = serializers.DateTimeField(source='published_at', required=False, allow_null=True)
    authors = serializers.PrimaryKeyRelatedField(queryset=User.objects.all(), many=True, required=False)
    populatedAuthors = serializers.SerializerMethodField()
    meta = serializers.SerializerMethodField()
    metaTitle = CleanCharField(source='meta_title', required=False, allow_blank=True, max_length=255, write_only=True)
    metaDescription = CleanCharField(source='meta_description', required=False, allow_blank=True, write_only=True)
    metaImage = MediaRefField(source='meta_image', required=False, allow_null=True, write_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = News
        fields = ['id', 'title', 'slug', 'image', 'content', 'status', 'publishedAt', 'authors',
                  'populatedAuthors', 'meta', 'metaTitle', 'metaDescription', 'metaImage',
                  'createdAt', 'updatedAt']

    def validate_content(self, v):
        return clean_html(v)

    def validate_authors(self, v):
        if not v:
            raise serializers.ValidationError('News must have at least one author')
        return v

    def validate_slug(self, v):
        qs = News.objects.filter(slug=v)
        if self.instance is not None:
            qs = qs.exclude(pk=self.instance.pk)
        if v and qs.exists():
            raise serializers.ValidationError('Slug is already in use')
        return v

    def get_populatedAuthors(self, obj):
        return [{'id': u.id, 'name': u.display_name} for u in obj.authors.all()]

    def get_meta(self, obj):
        return {
            'title': obj.meta_title or obj.title,
            'description': obj.meta_description,
            'image': MediaRefField(read_only=True).to_representation(obj.meta_image) if obj.meta_image_id else None,
        }
