"""
URL configuration for resumelegend project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""
from django.contrib import admin
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from applications.views import ApplicationViewSet
from generation.views import (
    CoverLetterGenerateView,
    CoverLetterViewSet,
    ExportView,
    ImproveForJobView,
    ImproveForRoleView,
)
from leaderboard.views import LeaderboardView
from reminders.views import ReminderViewSet
from resumes.views import ResumeFileViewSet, ResumeVersionViewSet
from resumelegend.views import DashboardView

# Create router and register viewsets
router = DefaultRouter()
router.register(r'resumes', ResumeFileViewSet, basename='resume')
router.register(r'resume-versions', ResumeVersionViewSet, basename='resume-version')
router.register(r'applications', ApplicationViewSet, basename='application')
router.register(r'reminders', ReminderViewSet, basename='reminder')
router.register(r'cover-letters', CoverLetterViewSet, basename='cover-letter')

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', include(router.urls)),
    path('api/generation/improve-for-role/', ImproveForRoleView.as_view(), name='improve-for-role'),
    path('api/generation/improve-for-job/', ImproveForJobView.as_view(), name='improve-for-job'),
    path('api/generation/cover-letter/', CoverLetterGenerateView.as_view(), name='generate-cover-letter'),
    path('api/generation/export/', ExportView.as_view(), name='export-text'),
    path('api/leaderboard/', LeaderboardView.as_view(), name='leaderboard'),
    path('api/dashboard/', DashboardView.as_view(), name='dashboard'),
    path('api-auth/', include('rest_framework.urls')),
]
