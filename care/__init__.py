"""Pet-care application for the Pawie site.

This package contains models, serializers, services, views and route
registrations for accounts, pets, medical records, reminders and news.
"""
