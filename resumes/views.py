"""
Resumes app views

ViewSets for uploaded resume files and the resume version ledger.
"""
import logging

from django.core.exceptions import ValidationError
from django.http import Http404
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from accounts.permissions import IsAdminOrOwner
from generation.export import text_attachment

from .extraction import ResumeExtractionError
from .models import ResumeVersion
from .serializers import ResumeFileSerializer, ResumeUploadSerializer, ResumeVersionSerializer
from .services import ResumeStorageService, ResumeVersionService

logger = logging.getLogger(__name__)


class ResumeFileViewSet(viewsets.ViewSet):
    """
    ViewSet for the current user's stored resume files.

    - GET: List resumes, newest first
    - POST: Upload a PDF or DOCX (multipart field "file"), replacing a file
      of the same name
    - DELETE {filename}: Remove a resume
    - GET current/: The most recent resume
    - GET {filename}/text/: Extracted plain text
    """

    permission_classes = [IsAuthenticated]
    parser_classes = [MultiPartParser, FormParser, JSONParser]
    lookup_field = 'filename'
    lookup_value_regex = '[^/]+'

    def get_service(self) -> ResumeStorageService:
        return ResumeStorageService()

    def list(self, request):
        try:
            resumes = self.get_service().list(request.user)
        except Exception:  # noqa: BLE001
            logger.exception("Failed to list resumes for user %s", request.user.pk)
            return Response(
                {'error': 'Could not load your resumes.'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return Response(ResumeFileSerializer(resumes, many=True).data)

    def create(self, request):
        upload_serializer = ResumeUploadSerializer(data=request.data)
        upload_serializer.is_valid(raise_exception=True)

        try:
            resume = self.get_service().upload(
                upload_serializer.validated_data['file'],
                request.user,
            )
        except ValidationError as e:
            return Response({'errors': e.messages}, status=status.HTTP_400_BAD_REQUEST)
        except Exception:  # noqa: BLE001
            logger.exception("Upload failed for user %s", request.user.pk)
            return Response(
                {'error': 'Failed to upload file. Please try again.'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response(ResumeFileSerializer(resume).data, status=status.HTTP_201_CREATED)

    def destroy(self, request, filename=None):
        try:
            deleted = self.get_service().delete(request.user, filename)
        except Exception:  # noqa: BLE001
            logger.exception("Failed to delete resume %s for user %s", filename, request.user.pk)
            return Response(
                {'error': 'Could not delete your resume.'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        if not deleted:
            raise Http404("Resume not found.")
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=['get'])
    def current(self, request):
        """
        Return the most recently uploaded resume.

        GET /api/resumes/current/
        """
        try:
            resume = self.get_service().current(request.user)
        except Exception:  # noqa: BLE001
            logger.exception("Failed to load current resume for user %s", request.user.pk)
            return Response(
                {'error': 'Could not load your resumes.'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        if resume is None:
            return Response({'detail': 'No resume uploaded yet.'}, status=status.HTTP_404_NOT_FOUND)
        return Response(ResumeFileSerializer(resume).data)

    @action(detail=True, methods=['get'])
    def text(self, request, filename=None):
        """
        Return the plain text extracted from a stored resume.

        GET /api/resumes/{filename}/text/
        """
        try:
            content = self.get_service().read_text(request.user, filename)
        except FileNotFoundError:
            raise Http404("Resume not found.")
        except ResumeExtractionError as e:
            return Response({'errors': [str(e)]}, status=status.HTTP_400_BAD_REQUEST)
        except Exception:  # noqa: BLE001
            logger.exception("Failed to read resume %s for user %s", filename, request.user.pk)
            return Response(
                {'error': 'Could not read your resume.'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return Response({'name': filename, 'text': content})


class ResumeVersionViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """
    ViewSet for ResumeVersion.

    - GET: List versions, newest first
    - GET {id}: Retrieve a version
    - DELETE {id}: Delete a version
    - POST {id}/set-default/: Make this the user's default version
    - GET {id}/export/: Download the tweaked text as a .txt file
    """

    serializer_class = ResumeVersionSerializer
    permission_classes = [IsAuthenticated, IsAdminOrOwner]

    def get_queryset(self):
        """
        Filter to show only current user's versions.
        Admins can see all versions.
        """
        if self.request.user.role == 'ADMIN':
            return ResumeVersion.objects.all()
        return ResumeVersion.objects.filter(user=self.request.user)

    def perform_destroy(self, instance):
        ResumeVersionService.delete(instance.pk, instance.user)

    @action(detail=True, methods=['post'], url_path='set-default')
    def set_default(self, request, pk=None):
        """
        Flag a version as the owner's default.

        POST /api/resume-versions/{id}/set-default/
        """
        version = self.get_object()
        version = ResumeVersionService.set_default(version.pk, version.user)
        return Response(self.get_serializer(version).data)

    @action(detail=True, methods=['get'])
    def export(self, request, pk=None):
        """
        GET /api/resume-versions/{id}/export/
        """
        version = self.get_object()
        return text_attachment(version.tweaked_text, version.original_filename)
