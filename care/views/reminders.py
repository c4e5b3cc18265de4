from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from care.serializers.reminders import ReminderListQuerySerializer, ReminderSerializer
from care.services import reminders as reminder_service
from care.services.pets import get_pet_for


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def pet_reminders_view(request, pet_id: int):
    pet = get_pet_for(request.user, pet_id)
    if request.method == 'POST':
        s = ReminderSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        reminder = reminder_service.add_reminder(request.user, pet, s.validated_data)
        return Response(ReminderSerializer(reminder).data, status=status.HTTP_201_CREATED)
    return Response(ReminderSerializer(pet.reminders.all(), many=True).data)


@api_view(['GET', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated])
def pet_reminder_detail_view(request, pet_id: int, reminder_id: int):
    pet = get_pet_for(request.user, pet_id)
    reminder = reminder_service.get_reminder(pet, reminder_id)
    if request.method == 'GET':
        return Response(ReminderSerializer(reminder).data)
    if request.method == 'DELETE':
        reminder_service.delete_reminder(request.user, pet, reminder)
        return Response(status=status.HTTP_204_NO_CONTENT)
    s = ReminderSerializer(reminder, data=request.data, partial=True)
    s.is_valid(raise_exception=True)
    reminder = reminder_service.update_reminder(request.user, pet, reminder, s.validated_data)
    return Response(ReminderSerializer(reminder).data)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def all_reminders_view(request):
    """Reminders across every pet the user can see."""
    q = ReminderListQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    result = reminder_service.reminders_for_user(
        request.user,
        filter=q.validated_data['filter'],
        limit=q.validated_data['limit'],
        pet_id=q.validated_data.get('petId'),
    )
    data = [dict(item, date=item['date'].isoformat()) for item in result['data']]
    return Response({'ok': True, 'data': data, 'total': result['total'], 'hasMore': result['hasMore']})
