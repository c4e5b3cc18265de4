"""
Pet profile and daily care endpoints.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from care.permissions import CanCreatePets
from care.serializers.pets import DailyCareSerializer, PetDetailSerializer, PetListQuerySerializer, PetSerializer
from care.services import pets as pet_service


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, CanCreatePets])
def pets_view(request):
    if request.method == 'POST':
        s = PetSerializer(data=request.data, context={'request': request})
        s.is_valid(raise_exception=True)
        pet = pet_service.create_pet(request.user, s.validated_data)
        return Response({'ok': True, 'doc': PetSerializer(pet, context={'request': request}).data},
                        status=status.HTTP_201_CREATED)

    q = PetListQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    page = q.validated_data.get('page') or 1
    limit = q.validated_data.get('limit') or 0
    pets, total = pet_service.list_pets(
        request.user,
        species=q.validated_data.get('species'),
        q=q.validated_data.get('q'),
        page=page, limit=limit,
    )
    return Response({
        'docs': PetSerializer(pets, many=True, context={'request': request}).data,
        'totalDocs': total,
        'page': page,
        'limit': limit or total,
    })


@api_view(['GET', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated])
def pet_detail_view(request, pet_id: int):
    pet = pet_service.get_pet_for(request.user, pet_id)
    if request.method == 'GET':
        return Response(PetDetailSerializer(pet, context={'request': request}).data)
    if request.method == 'DELETE':
        pet_service.delete_pet(request.user, pet)
        return Response(status=status.HTTP_204_NO_CONTENT)

    daily_care = None
    if 'dailyCare' in request.data:
        dc = DailyCareSerializer(data=request.data['dailyCare'], partial=True)
        if not dc.is_valid():
            raise ValidationError({'dailyCare': dc.errors})
        daily_care = dc.validated_data
    data = {k: v for k, v in request.data.items() if k not in ('dailyCare', 'medicalRecord', 'reminders')}
    s = PetSerializer(pet, data=data, partial=True, context={'request': request})
    s.is_valid(raise_exception=True)
    pet = pet_service.update_pet(request.user, pet, s.validated_data, daily_care=daily_care)
    return Response({'ok': True, 'doc': PetDetailSerializer(pet, context={'request': request}).data})


@api_view(['GET', 'PUT', 'PATCH'])
@permission_classes([IsAuthenticated])
def daily_care_view(request, pet_id: int):
    pet = pet_service.get_pet_for(request.user, pet_id)
    if request.method == 'GET':
        return Response(DailyCareSerializer(pet_service.get_daily_care(pet)).data)
    s = DailyCareSerializer(data=request.data, partial=request.method == 'PATCH')
    s.is_valid(raise_exception=True)
    care = pet_service.update_daily_care(request.user, pet, s.validated_data, replace=request.method == 'PUT')
    return Response(DailyCareSerializer(care).data)
