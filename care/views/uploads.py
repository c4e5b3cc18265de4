from rest_framework import status
from rest_framework.decorators import api_view, parser_classes, permission_classes
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from care.serializers.uploads import DocumentSerializer, DocumentUploadSerializer, MediaSerializer, MediaUploadSerializer
from care.services import uploads as upload_service


@api_view(['POST'])
@permission_classes([IsAuthenticated])
@parser_classes([MultiPartParser, FormParser])
def media_upload_view(request):
    s = MediaUploadSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    media = upload_service.save_media(request.user, s.validated_data['file'], s.validated_data.get('alt') or '')
    data = MediaSerializer(media, context={'request': request}).data
    return Response({'id': data['id'], 'url': data['url'], 'doc': data}, status=status.HTTP_201_CREATED)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def media_detail_view(request, media_id: int):
    media = upload_service.get_media(media_id)
    return Response(MediaSerializer(media, context={'request': request}).data)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
@parser_classes([MultiPartParser, FormParser])
def document_upload_view(request):
    s = DocumentUploadSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    vd = s.validated_data
    doc = upload_service.upload_document(
        request.user, vd['file'], vd.get('title'),
        description=vd.get('description'), category=vd.get('category'),
    )
    return Response(DocumentSerializer(doc, context={'request': request}).data, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated])
@parser_classes([JSONParser, MultiPartParser, FormParser])
def document_detail_view(request, document_id: int):
    doc = upload_service.get_document(document_id)
    if request.method == 'GET':
        return Response(DocumentSerializer(doc, context={'request': request}).data)
    if request.method == 'DELETE':
        upload_service.delete_document(request.user, doc)
        return Response(status=status.HTTP_204_NO_CONTENT)
    s = DocumentSerializer(doc, data=request.data, partial=True, context={'request': request})
    s.is_valid(raise_exception=True)
    doc = upload_service.update_document(request.user, doc, s.validated_data)
    return Response(DocumentSerializer(doc, context={'request': request}).data)
