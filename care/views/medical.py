from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from care.services import medical as medical_service
from care.services.pets import get_pet_for


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def medical_record_view(request, pet_id: int):
    pet = get_pet_for(request.user, pet_id)
    return Response(medical_service.get_medical_record(pet, context={'request': request}))


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def section_view(request, pet_id: int, section: str):
    pet = get_pet_for(request.user, pet_id)
    sec = medical_service.get_section(section)
    ctx = {'request': request}
    if request.method == 'POST':
        entry = medical_service.add_entry(request.user, pet, sec, request.data, context=ctx)
        return Response(sec.serializer(entry, context=ctx).data, status=status.HTTP_201_CREATED)
    return Response(sec.serializer(medical_service.section_queryset(pet, sec), many=True, context=ctx).data)


@api_view(['GET', 'PATCH', 'PUT', 'DELETE'])
@permission_classes([IsAuthenticated])
def entry_view(request, pet_id: int, section: str, entry_id: int):
    pet = get_pet_for(request.user, pet_id)
    sec = medical_service.get_section(section)
    ctx = {'request': request}
    if request.method == 'GET':
        return Response(sec.serializer(medical_service.get_entry(pet, sec, entry_id), context=ctx).data)
    if request.method == 'DELETE':
        medical_service.delete_entry(request.user, pet, sec, entry_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
    entry = medical_service.update_entry(request.user, pet, sec, entry_id, request.data,
                                         partial=request.method == 'PATCH', context=ctx)
    return Response(sec.serializer(entry, context=ctx).data)
