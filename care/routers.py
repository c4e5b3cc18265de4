"""
URL mappings for the Pawie API and pages.

API paths live under ``/api/`` and have no trailing slash, matching
the front-end client.  Page paths mirror the public site.
"""
from django.urls import include, path

from .views import accounts, health, medical, news, pages, pets, reminders, uploads

api_patterns = [
    # accounts
    path('users', accounts.users_view, name='users'),
    path('users/login', accounts.login_view, name='login'),
    path('users/logout', accounts.logout_view, name='logout'),
    path('users/refresh', accounts.refresh_view, name='token-refresh'),
    path('users/me', accounts.me_view, name='me'),
    path('users/update-password', accounts.update_password_view, name='update-password'),
    path('users/<int:user_id>', accounts.user_detail_view, name='user-detail'),
    # uploads
    path('media', uploads.media_upload_view, name='media'),
    path('media/<int:media_id>', uploads.media_detail_view, name='media-detail'),
    path('documents', uploads.document_upload_view, name='documents'),
    path('documents/<int:document_id>', uploads.document_detail_view, name='document-detail'),
    # pets
    path('pets', pets.pets_view, name='pets'),
    path('pets/<int:pet_id>', pets.pet_detail_view, name='pet-detail'),
    path('pets/<int:pet_id>/daily-care', pets.daily_care_view, name='daily-care'),
    path('pets/<int:pet_id>/medical-record', medical.medical_record_view, name='medical-record'),
    path('pets/<int:pet_id>/medical-record/<str:section>', medical.section_view, name='medical-section'),
    path('pets/<int:pet_id>/medical-record/<str:section>/<int:entry_id>', medical.entry_view, name='medical-entry'),
    path('pets/<int:pet_id>/reminders', reminders.pet_reminders_view, name='pet-reminders'),
    path('pets/<int:pet_id>/reminders/<int:reminder_id>', reminders.pet_reminder_detail_view, name='pet-reminder-detail'),
    # reminders across pets
    path('reminders', reminders.all_reminders_view, name='reminders'),
    # news
    path('news', news.news_view, name='news'),
    path('news/<slug:slug>', news.news_detail_view, name='news-detail'),
]

page_patterns = [
    path('', pages.home, name='home'),
    path('news', pages.news_list, name='news-page'),
    path('news/<slug:slug>', pages.news_detail, name='news-detail-page'),
    path('contact', pages.contact, name='contact-page'),
    path('login', pages.login_page, name='login-page'),
    path('sign-up', pages.signup_page, name='signup-page'),
    path('logout', pages.logout_page, name='logout-page'),
    path('my-dashboard', pages.dashboard, name='dashboard-page'),
    path('profile', pages.profile, name='profile-page'),
    path('reminders', pages.reminders, name='reminders-page'),
    path('pets/<int:pet_id>', pages.pet_detail, name='pet-page'),
    path('pets/<int:pet_id>/edit', pages.pet_edit, name='pet-edit-page'),
]

urlpatterns = [
    path('api/', include(api_patterns)),
    path('healthz', health.healthz, name='healthz'),
    path('', include('django_prometheus.urls')),
    *page_patterns,
]
