from __future__ import annotations

import logging
import os
from typing import Iterable, Optional

from django.conf import settings
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError

from care.models import Document, Media
from care.permissions import is_admin
from care.services.audit import log_action

logger = logging.getLogger(__name__)


def _check_file(f, allowed: Iterable[str], type_message: Optional[str] = None) -> str:
    content_type = (getattr(f, 'content_type', '') or '').lower()
    if not any(content_type.startswith(prefix) for prefix in allowed):
        logger.info("upload rejected: type %s", content_type or 'unknown')
        raise ValidationError({'file': type_message or f'File type "{content_type or "unknown"}" is not allowed'})
    max_bytes = settings.UPLOAD_MAX_MB * 1024 * 1024
    if f.size > max_bytes:
        logger.info("upload rejected: %s bytes", f.size)
        raise ValidationError({'file': f'File exceeds the {settings.UPLOAD_MAX_MB} MB limit'})
    return content_type


def save_media(user, f, alt: str = '') -> Media:
    """Store an uploaded image."""
    content_type = _check_file(f, settings.ALLOWED_IMAGE_TYPES, 'File must be a valid image (jpg, png, etc.)')
    return Media.objects.create(
        file=f, alt=alt or os.path.splitext(f.name)[0], content_type=content_type,
        size=f.size, uploaded_by=user,
    )


def get_media(media_id: int) -> Media:
    media = Media.objects.filter(pk=media_id).first()
    if media is None:
        raise NotFound(f'Media with ID {media_id} not found')
    return media


def upload_document(user, f, title: Optional[str] = None, **extra) -> Document:
    content_type = _check_file(f, settings.ALLOWED_UPLOAD_TYPES)
    title = (title or '').strip() or getattr(f, 'name', '') or 'Uploaded Document'
    doc = Document.objects.create(
        title=title,
        description=extra.get('description') or '',
        category=extra.get('category') or '',
        file=f,
        filename=os.path.basename(getattr(f, 'name', '') or ''),
        content_type=content_type,
        size=f.size,
        uploaded_by=user,
    )
    log_action(user=user, action='document_upload', object_type='document', object_id=doc.pk,
               detail={'filename': doc.filename, 'size': doc.size})
    return doc


def get_document(document_id: int) -> Document:
    doc = Document.objects.filter(pk=document_id).first()
    if doc is None:
        raise NotFound(f'Document with ID {document_id} not found')
    return doc


def ensure_document_owner(user, doc: Document) -> None:
    if not (is_admin(user) or doc.uploaded_by_id == user.id):
        raise PermissionDenied('Only the uploader can modify this document')


def update_document(user, doc: Document, data: dict) -> Document:
    ensure_document_owner(user, doc)
    for attr in ('title', 'description', 'category'):
        if attr in data:
            setattr(doc, attr, data[attr])
    doc.save()
    return doc


def delete_document(user, doc: Document) -> None:
    ensure_document_owner(user, doc)
    doc.file.delete(save=False)
    doc.delete()
