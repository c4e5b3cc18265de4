"""
HTTP client for the Pawie REST API.

A thin wrapper over ``requests`` used by scripts and integrations::

    client = PawieClient("https://pawie.example")
    client.login("olivia", "Secret123")
    pet = client.get_pet(3)
    client.add_vaccine(3, {"vaccineType": "Rabies", "administrationDate": "2024-05-01"})

Every non-2xx response raises :class:`PawieAPIError` carrying the
message and per-field errors from the API error envelope.
"""
from __future__ import annotations

from typing import Any, BinaryIO, Dict, List, Optional

import requests

DEFAULT_TIMEOUT = 15


class PawieAPIError(Exception):
    """Non-2xx answer from the API."""

    def __init__(self, status: int, message: str, errors: Optional[List[Dict[str, str]]] = None):
        super().__init__(f"{status}: {message}")
        self.status = status
        self.message = message
        self.errors = errors or []


def _error_from_response(resp: requests.Response) -> PawieAPIError:
    try:
        body = resp.json()
    except ValueError:
        return PawieAPIError(resp.status_code, resp.text or resp.reason or 'Request failed')
    err = body.get('error') if isinstance(body, dict) else None
    if isinstance(err, dict):
        return PawieAPIError(resp.status_code, err.get('message') or 'Request failed', err.get('errors') or [])
    if isinstance(err, str):
        return PawieAPIError(resp.status_code, err)
    return PawieAPIError(resp.status_code, str(body))


class PawieClient:
    def __init__(self, base_url: str, token: Optional[str] = None,
                 session: Optional[requests.Session] = None, timeout: float = DEFAULT_TIMEOUT):
        self.base_url = base_url.rstrip('/')
        self.token = token
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # plumbing
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, **kwargs) -> Any:
        headers = kwargs.pop('headers', {})
        if self.token:
            headers['Authorization'] = f'Token {self.token}'
        resp = self.session.request(method, f'{self.base_url}{path}', headers=headers,
                                    timeout=self.timeout, **kwargs)
        if not 200 <= resp.status_code < 300:
            raise _error_from_response(resp)
        if resp.status_code == 204 or not resp.content:
            return None
        return resp.json()

    # ------------------------------------------------------------------
    # accounts
    # ------------------------------------------------------------------
    def login(self, username: str, password: str) -> Dict[str, Any]:
        data = self._request('POST', '/api/users/login', json={'username': username, 'password': password})
        self.token = data['token']
        return data

    def me(self) -> Dict[str, Any]:
        return self._request('GET', '/api/users/me')['user']

    # ------------------------------------------------------------------
    # pets
    # ------------------------------------------------------------------
    def get_pet(self, pet_id: int) -> Dict[str, Any]:
        return self._request('GET', f'/api/pets/{pet_id}')

    def create_pet(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request('POST', '/api/pets', json=data)['doc']

    def update_pet(self, pet_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request('PATCH', f'/api/pets/{pet_id}', json=data)['doc']

    def update_daily_care(self, pet_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request('PATCH', f'/api/pets/{pet_id}/daily-care', json=data)

    # ------------------------------------------------------------------
    # uploads
    # ------------------------------------------------------------------
    def upload_media(self, fileobj: BinaryIO, filename: str, content_type: str, alt: str = '') -> Dict[str, Any]:
        return self._request('POST', '/api/media', files={'file': (filename, fileobj, content_type)},
                             data={'alt': alt})

    def upload_document(self, fileobj: BinaryIO, filename: str, content_type: str,
                        title: Optional[str] = None, **extra) -> Dict[str, Any]:
        data = {k: v for k, v in dict(extra, title=title).items() if v is not None}
        return self._request('POST', '/api/documents', files={'file': (filename, fileobj, content_type)}, data=data)

    def get_document(self, document_id: int) -> Dict[str, Any]:
        return self._request('GET', f'/api/documents/{document_id}')

    # ------------------------------------------------------------------
    # medical record
    # ------------------------------------------------------------------
    def get_medical_record(self, pet_id: int) -> Dict[str, List[Dict[str, Any]]]:
        return self._request('GET', f'/api/pets/{pet_id}/medical-record')

    def add_entry(self, pet_id: int, section: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request('POST', f'/api/pets/{pet_id}/medical-record/{section}', json=data)

    def update_entry(self, pet_id: int, section: str, entry_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request('PATCH', f'/api/pets/{pet_id}/medical-record/{section}/{entry_id}', json=data)

    def delete_entry(self, pet_id: int, section: str, entry_id: int) -> None:
        self._request('DELETE', f'/api/pets/{pet_id}/medical-record/{section}/{entry_id}')

    def add_vaccine(self, pet_id, data):
        return self.add_entry(pet_id, 'vaccines', data)

    def update_vaccine(self, pet_id, entry_id, data):
        return self.update_entry(pet_id, 'vaccines', entry_id, data)

    def delete_vaccine(self, pet_id, entry_id):
        return self.delete_entry(pet_id, 'vaccines', entry_id)

    def add_deworming(self, pet_id, data):
        return self.add_entry(pet_id, 'deworming', data)

    def update_deworming(self, pet_id, entry_id, data):
        return self.update_entry(pet_id, 'deworming', entry_id, data)

    def delete_deworming(self, pet_id, entry_id):
        return self.delete_entry(pet_id, 'deworming', entry_id)

    def add_vet_appointment(self, pet_id, data):
        return self.add_entry(pet_id, 'vetAppointments', data)

    def update_vet_appointment(self, pet_id, entry_id, data):
        return self.update_entry(pet_id, 'vetAppointments', entry_id, data)

    def delete_vet_appointment(self, pet_id, entry_id):
        return self.delete_entry(pet_id, 'vetAppointments', entry_id)

    def add_surgical_procedure(self, pet_id, data):
        return self.add_entry(pet_id, 'surgicalProcedures', data)

    def update_surgical_procedure(self, pet_id, entry_id, data):
        return self.update_entry(pet_id, 'surgicalProcedures', entry_id, data)

    def delete_surgical_procedure(self, pet_id, entry_id):
        return self.delete_entry(pet_id, 'surgicalProcedures', entry_id)

    def add_allergy(self, pet_id, data):
        return self.add_entry(pet_id, 'allergies', data)

    def update_allergy(self, pet_id, entry_id, data):
        return self.update_entry(pet_id, 'allergies', entry_id, data)

    def delete_allergy(self, pet_id, entry_id):
        return self.delete_entry(pet_id, 'allergies', entry_id)

    def add_lab_test(self, pet_id, data):
        return self.add_entry(pet_id, 'laboratoryTests', data)

    def update_lab_test(self, pet_id, entry_id, data):
        return self.update_entry(pet_id, 'laboratoryTests', entry_id, data)

    def delete_lab_test(self, pet_id, entry_id):
        return self.delete_entry(pet_id, 'laboratoryTests', entry_id)

    def add_medical_treatment(self, pet_id, data):
        return self.add_entry(pet_id, 'medicalTreatments', data)

    def update_medical_treatment(self, pet_id, entry_id, data):
        return self.update_entry(pet_id, 'medicalTreatments', entry_id, data)

    def delete_medical_treatment(self, pet_id, entry_id):
        return self.delete_entry(pet_id, 'medicalTreatments', entry_id)

    def add_evolution_entry(self, pet_id, data):
        return self.add_entry(pet_id, 'evolutionTracking', data)

    def update_evolution_entry(self, pet_id, entry_id, data):
        return self.update_entry(pet_id, 'evolutionTracking', entry_id, data)

    def delete_evolution_entry(self, pet_id, entry_id):
        return self.delete_entry(pet_id, 'evolutionTracking', entry_id)

    # ------------------------------------------------------------------
    # reminders
    # ------------------------------------------------------------------
    def add_reminder(self, pet_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request('POST', f'/api/pets/{pet_id}/reminders', json=data)

    def update_reminder(self, pet_id: int, reminder_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request('PATCH', f'/api/pets/{pet_id}/reminders/{reminder_id}', json=data)

    def delete_reminder(self, pet_id: int, reminder_id: int) -> None:
        self._request('DELETE', f'/api/pets/{pet_id}/reminders/{reminder_id}')

    def list_reminders(self, filter: str = 'upcoming', limit: int = 0, pet_id: Optional[int] = None) -> Dict[str, Any]:
        params: Dict[str, Any] = {'filter': filter, 'limit': limit}
        if pet_id:
            params['petId'] = pet_id
        return self._request('GET', '/api/reminders', params=params)

    # ------------------------------------------------------------------
    # news
    # ------------------------------------------------------------------
    def list_news(self, page: int = 1) -> Dict[str, Any]:
        return self._request('GET', '/api/news', params={'page': page})
