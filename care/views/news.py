from django.db import transaction
from rest_framework import serializers, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from care.models import News
from care.permissions import IsAdminOrReadOnly
from care.serializers.news import NewsSerializer
from care.services import news as news_service


class NewsPageQuerySerializer(serializers.Serializer):
    page = serializers.IntegerField(min_value=1, required=False, default=1)
    limit = serializers.IntegerField(min_value=1, max_value=100, required=False)


@api_view(['GET', 'POST'])
@permission_classes([AllowAny, IsAdminOrReadOnly])
def news_view(request):
    if request.method == 'POST':
        s = NewsSerializer(data=request.data, context={'request': request})
        s.is_valid(raise_exception=True)
        with transaction.atomic():
            authors = s.validated_data.pop('authors', None) or [request.user]
            news = s.save(authors=authors)
        return Response({'ok': True, 'doc': NewsSerializer(news, context={'request': request}).data},
                        status=status.HTTP_201_CREATED)

    q = NewsPageQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    payload = news_service.paginate_news(
        request.user, q.validated_data['page'],
        lambda items: NewsSerializer(items, many=True, context={'request': request}).data,
        page_size=q.validated_data.get('limit') or 0,
    )
    return Response(payload)


@api_view(['GET', 'PATCH', 'DELETE'])
@permission_classes([AllowAny, IsAdminOrReadOnly])
def news_detail_view(request, slug: str):
    news = news_service.get_news_by_slug(request.user, slug)
    if request.method == 'GET':
        return Response(NewsSerializer(news, context={'request': request}).data)
    if request.method == 'DELETE':
        news.delete()
        return Response(status=status.HTTP_204_NO_CONTENT)
    s = NewsSerializer(news, data=request.data, partial=True, context={'request': request})
    s.is_valid(raise_exception=True)
    news = s.save()
    if news.status == News.STATUS_PUBLISHED and not news.authors.exists():
        news.authors.add(request.user)
    return Response({'ok': True, 'doc': NewsSerializer(news, context={'request': request}).data})
